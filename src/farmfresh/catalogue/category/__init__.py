from farmfresh.catalogue.category import category, management  # noqa: F401
