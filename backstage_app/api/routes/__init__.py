"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Read endpoints register GET and HEAD via READ_METHODS
    - Routes never mutate shared state; each response is computed independently
"""

# Read endpoints answer HEAD as well as GET (load-balancer probes send HEAD)
READ_METHODS = ["GET", "HEAD"]
