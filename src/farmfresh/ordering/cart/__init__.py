from farmfresh.ordering.cart import cart, events, items, repository  # noqa: F401
