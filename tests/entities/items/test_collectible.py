"""
test_collectible.py
-------------------
Coin animation and idempotent collection.
"""

from princess_quest.core.runtime.game_settings import CollectibleDefaults
from princess_quest.entities.items.collectible import Collectible


def test_animation_advances_until_collected():
    coin = Collectible(10, 10)
    for _ in range(CollectibleDefaults.FRAME_DELAY + 1):
        coin.advance()
    assert coin.frame == 1

    coin.collect()
    coin.advance()
    for _ in range(CollectibleDefaults.FRAME_DELAY + 1):
        coin.advance()
    assert coin.frame == 1


def test_collect_is_idempotent():
    coin = Collectible(10, 10)
    assert coin.collect()
    assert not coin.collect()
    assert coin.collected


def test_coin_never_moves():
    coin = Collectible(10, 20)
    for _ in range(50):
        coin.advance()
    assert tuple(coin.pos) == (10, 20)
