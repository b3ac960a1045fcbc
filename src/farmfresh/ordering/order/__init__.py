from farmfresh.ordering.order import events, order, repository, status  # noqa: F401
