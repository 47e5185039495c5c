from .settings import LIB_TAG, LOG_LEVEL, VERTICAL_BOUND_OFFSET  # noqa: F401
