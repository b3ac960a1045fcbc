from farmfresh.catalogue.product import events, management, product, repository  # noqa: F401
