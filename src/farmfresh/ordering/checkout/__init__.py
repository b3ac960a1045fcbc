from farmfresh.ordering.checkout import placement  # noqa: F401
