# Stop code closing an indefinite-length item (major type 7, additional info 31).
BREAK = 0xFF

# Magnitude returned by decode_header for additional info 31. Legal magnitudes
# are never negative, so this cannot collide with a real length.
INDEFINITE = -1

# Additional-information values with special meaning.
AI_UINT8 = 24
AI_UINT16 = 25
AI_UINT32 = 26
AI_UINT64 = 27
AI_INDEFINITE = 31

# Nesting bound for the skipper and the renderer.
MAX_DEPTH = 64

# Default output capacity of the text renderer, in characters.
DEFAULT_TEXT_LIMIT = 65536
