from enum import IntEnum


class Player(IntEnum):
    """
    The two sides. Values double as the board encoding (empty cells are 0),
    so ``board == player`` masks one side's stones and ``-player`` is the
    opponent, as with the +1/-1 players of the other board games here.
    """
    FIRST = 1
    SECOND = -1

    @classmethod
    def starting(cls) -> "Player":
        return cls.FIRST

    def inverse(self) -> "Player":
        return Player(-self.value)

    def __str__(self):
        return self.name.lower()
