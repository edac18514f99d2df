"""Frame selection for the animated sprites."""

FRAMES_PER_STEP = 8
ENEMY_FRAMES = 4


class EnemyAnimator:
    """Cycles through the enemy frames, advancing one frame every few ticks."""

    def __init__(self):
        self.time = 0
        self.frame = 0

    def tick(self):
        """Advance one loop iteration and return the enemy frame to show."""
        self.time += 1
        if self.time == FRAMES_PER_STEP:
            self.time = 0
            self.frame += 1
        if self.frame >= ENEMY_FRAMES:
            self.frame = 0
        return self.frame


def player_frame(time):
    """Return the player frame index for a time value, or None to keep the current one."""
    if time % 9 == 0:
        return 1
    if time % 6 == 0:
        return 2
    if time % 3 == 0:
        return 0
    return None