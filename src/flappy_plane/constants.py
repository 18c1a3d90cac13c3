"""
constants.py: Centralized configuration for the game world, physics and display.
"""

# -------- Display Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
FPS = 60                        # One tick per rendered frame
WINDOW_TITLE = "Flappy Plane"

# -------- Plane Config --------
# Hitbox shared by the plane and the pipe collision test (half extents)
PLANE_HALF_WIDTH = 20
PLANE_HALF_HEIGHT = 10

# -------- Physics Config (pixels / tick) --------
GRAVITY_ACCEL = 0.25            # Added to velocity every tick
JUMP_IMPULSE = -6.0             # Velocity after a flap (overwrites, not additive)

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 150
PIPE_MARGIN = 50                # Minimum distance between the gap and either screen edge
PIPE_SPEED = 2
PIPE_SPAWN_INTERVAL_TICKS = 120 # Spawn every 120 ticks (2.0 seconds at 60 FPS)

# -------- Colors --------
SKY_COLOR = (135, 206, 235)
PIPE_COLOR = (0, 255, 0)        # #00FF00
FUSELAGE_COLOR = (128, 128, 128) # #808080
WING_COLOR = (96, 96, 96)       # #606060
COCKPIT_COLOR = (0, 0, 128)     # #000080
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 50, 50)
OVERLAY_COLOR = (0, 0, 0, 140)
