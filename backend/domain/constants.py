"""
Game constants for the timed-food snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Directions sharing an axis can't follow each other in the queue
AXIS = {
    UP: "vertical",
    DOWN: "vertical",
    LEFT: "horizontal",
    RIGHT: "horizontal",
}

# Unit step for each direction, y grows downwards (screen coordinates)
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Speed curve
MIN_SPEED = 1
MAX_SPEED = 20
MIN_MAINLOOP_INTERVAL_MS = 20
MAX_MAINLOOP_INTERVAL_MS = 120
# Milliseconds taken off the tick interval per speed point
SPEED_STEP_MS = (MAX_MAINLOOP_INTERVAL_MS - MIN_MAINLOOP_INTERVAL_MS) / MAX_SPEED

ELAPSED_TIME_STEP_SECONDS = 1

# Rendering
HEAD_COLOR = "green"

# Food tuning: (name, color, spawn_in seconds, remove_in seconds)
GROW_FOOD = ("grow", "yellow", 10, 30)
DOUBLE_FOOD = ("double", "red", 30, 15)
HALVE_FOOD = ("halve", "blue", 30, 15)
RESET_FOOD = ("reset", "purple", 180, 10)
TRAP_FOOD = ("trap", "black", 120, 30)

GROW_BLOCKS = 3
GROW_SCORE_INCREMENT = 1
LENGTH_SCORE_MULTIPLIER = 2
DOUBLE_LENGTH_FACTOR = 2
HALVE_LENGTH_FACTOR = 2

# Messages
START_MESSAGE = "Press N to start"
GAME_OVER_MESSAGE = "GAME OVER! Press N to play again"

# Key names (as reported by the frontend) to commands
START = "START"
KEY_BINDINGS = {
    "w": UP, "k": UP, "up": UP,
    "s": DOWN, "j": DOWN, "down": DOWN,
    "a": LEFT, "h": LEFT, "left": LEFT,
    "d": RIGHT, "l": RIGHT, "right": RIGHT,
    "n": START,
}
