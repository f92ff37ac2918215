import random
from config import W, GOAL_LEFT, GOAL_RIGHT, KEEPER_EASE
from core import Keeper

class KeeperAI:
    def __init__(self, rng=None, ease=KEEPER_EASE):
        self.rng = rng or random
        self.ease = ease

    def pick_target(self, keeper: Keeper):
        lo = GOAL_LEFT + keeper.w / 2
        span = (GOAL_RIGHT - GOAL_LEFT) - keeper.w
        return lo + self.rng.random() * span

    def reset(self, keeper: Keeper):
        keeper.x = W / 2
        keeper.target_x = self.pick_target(keeper)

    def update(self, keeper: Keeper):
        keeper.x += (keeper.target_x - keeper.x) * self.ease
