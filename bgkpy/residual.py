import numpy as np

import bgkpy as bk


class Residual:
    """Accumulators of the conserved state changes of a time step.

    Cell updates only ever add to the accumulators.
    Workers that update disjoint sets of cells may use their own
    instances and :meth:`merge` them afterwards.

    Parameters
    ----------
    shape : :obj:`tuple` [:obj:`int`]
        Shape of the conserved states.

    Attributes
    ----------
    res : :obj:`~numpy.array` [:obj:`float`]
        Sum of squared changes.
    avg : :obj:`~numpy.array` [:obj:`float`]
        Sum of absolute values.
    """
    def __init__(self, shape):
        self.res = np.zeros(shape)
        self.avg = np.zeros(shape)
        return

    def accumulate(self, w_old, w):
        self.res += (w - w_old)**2
        self.avg += np.abs(w)
        return

    def merge(self, other):
        """Add the sums of another instance."""
        assert self.res.shape == other.res.shape
        self.res += other.res
        self.avg += other.avg
        return

    def reset(self):
        self.res[...] = 0.0
        self.avg[...] = 0.0
        return

    def norm(self, ncells):
        """Normalized residual of the step.

        Parameters
        ----------
        ncells : :obj:`int`
            Number of accumulated cells.

        Returns
        -------
        norm : :obj:`~numpy.array` [:obj:`float`]
        """
        return (np.sqrt(self.res * ncells)
                / (self.avg + bk.RESIDUAL_EPSILON))
