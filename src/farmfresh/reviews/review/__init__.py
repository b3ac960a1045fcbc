from farmfresh.reviews.review import review, submission  # noqa: F401
