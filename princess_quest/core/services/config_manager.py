"""
config_manager.py
-----------------
Configuration loader for tunable simulation data.

Features:
- Supports .json and .py config files
- Builds a file index of the package config directory on first use
- Recursively merges loaded values over in-code defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
import importlib.util
from princess_quest.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    DATA_ROOT,
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename or full path (.json or .py)
        default_dict: Default fallback config
        strict: If True, raise FileNotFoundError on a missing or broken file

    Returns:
        dict: Defaults merged with the file contents
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename) and os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        if path.endswith(".py"):
            data = _load_py_module(path)
        else:
            data = _load_json(path)

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def build_file_index():
    """Scan config directories and cache all file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith((".json", ".py")) and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def rebuild_file_index():
    """Clear and rebuild index."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Lookup from the pre-built index."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    for ext in (".json", ".py"):
        key = filename + ext
        if key in _FILE_INDEX:
            return _FILE_INDEX[key]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_py_module(path):
    """Load Python config file and return DEFAULT_CONFIG if present."""
    try:
        spec = importlib.util.spec_from_file_location("config_module", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        DebugLogger.system(f"Loaded {os.path.basename(path)} (Python)", category="loading")
        return getattr(module, "DEFAULT_CONFIG", {})
    except (ImportError, AttributeError, SyntaxError) as e:
        DebugLogger.warn(f"Failed to load Python config {path}: {e}", category="loading")
        return {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {}
    for key, value in default.items():
        merged[key] = _merge_dicts(value, {}) if isinstance(value, dict) else value
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
