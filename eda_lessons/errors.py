class LessonDataError(ValueError):
    """Input table does not have the shape a lesson step expects."""
