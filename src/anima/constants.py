"""Global constants for the application."""

# Scene defaults
DEFAULT_WIDTH = 1920  # Pixel width of a scene
DEFAULT_HEIGHT = 1080  # Pixel height of a scene
DEFAULT_FPS = 60  # Default frames per second
DEFAULT_BACKGROUND_COLOR = (0, 0, 0)

# Animation defaults
DEFAULT_ANIMATION_DURATION = 1.0  # Seconds
DEFAULT_WAIT_DURATION = 1.0  # Seconds

# Manim-compatible world units: the frame is always 8 units tall
FRAME_HEIGHT = 8.0

# Camera motion
FOLLOW_REFERENCE_RATE = 60  # Damped follow closes the gap per 1/60 s step
SHAKE_INTENSITY = 0.2  # World units
SHAKE_FREQUENCY = 10.0  # Oscillations per second

# Mobject styling defaults
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DEFAULT_STROKE_WIDTH = 2.0  # Pixels at 1080p
REFERENCE_PIXEL_HEIGHT = 1080  # Stroke widths scale relative to this height
CIRCLE_SAMPLES = 96  # Outline points used to approximate a full circle

# Segment cache
CACHE_DIR_NAME = ".anima-cache"
SEGMENT_FILE_PREFIX = "segment_"
SEGMENT_FILE_SUFFIX = ".mp4"
CONCAT_LIST_NAME = ".concat_list.txt"

# External encoder
DEFAULT_FFMPEG_BINARY = "ffmpeg"
FFMPEG_ENV_VAR = "ANIMA_FFMPEG"
