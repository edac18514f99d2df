"""Error type and user-facing messages for map and game failures."""

LESS_ARGS = "ERROR! You need to pass the map file as a argument."
MORE_ARGS = "ERROR! You had surpassed the number of arguments."
NOT_SQUARE = "ERROR! The map is not square"
EMPTY_LINE = "ERROR! Unvalid map, there is a empty line."
EXTENSION = "ERROR! The map must be a archive '.ber'."
ALLOCATION = "ERROR! Memory allocation problem."
OPEN_FILE = "ERROR! Problem in opening the file."
EMPTY_MAP = "ERROR! The map is empty."
TEXTURE_ERROR = "ERROR! Problem with the texture image."
IMAGE_ERROR = "ERROR! Problem loading the image."
BORDER_WRONG = "ERROR! Wrong char in the border."
COLLECTABLE = "ERROR! There is no collectables in the map."
PERSONAGE = "ERROR! There isn't a personage in the map."
EXIT = "ERROR! There isn't a exit in the map."
EXTRA_PERS = "ERROR! There is more than one personage in the map."
EXTRA_EXIT = "ERROR! There is more than one exit in the map."
PATH_ERROR = "ERROR! It is impossible to get to the exit."
W_CHAR = "ERROR! There is a not identify charecter in the map."
BAD_CHAR = "ERROR! a not identify charecter is in the map."


class SoLongError(Exception):
    """Raised when a map or the game setup is invalid."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message