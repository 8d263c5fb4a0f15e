class PhysicalStateWarning(UserWarning):
    """A cell update produced a non-positive density or temperature.

    The affected component has been rolled back to its previous state.
    """
    pass


class FieldStateWarning(UserWarning):
    """The electromagnetic field state of a cell contains NaN values."""
    pass
