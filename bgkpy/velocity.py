import numpy as np

import bgkpy as bk


def newton_cotes(idx, num):
    """Composite Newton-Cotes coefficient of a single node.

    Parameters
    ----------
    idx : :obj:`int`
        One-based position of the node, ghost nodes included.
    num : :obj:`int`
        Total number of nodes, ghost nodes included.

    Returns
    -------
    coefficient : :obj:`float`
    """
    if idx == 1 or idx == num:
        return bk.NEWTON_COTES["boundary"]
    elif (idx - 5) % 4 == 0:
        return bk.NEWTON_COTES["even"]
    elif (idx - 3) % 4 == 0:
        return bk.NEWTON_COTES["center"]
    else:
        return bk.NEWTON_COTES["odd"]


# noinspection PyPep8Naming
class VelocitySpace(bk.BaseClass):
    r"""Discrete velocity space of a cell, with quadrature weights.

    Nodes are cell centered,
    :math:`u_i = u_0 + (i - 1/2) \delta` for
    :math:`i = 1 - n_g, \ldots, n + n_g`
    with :math:`\delta = (u_1 - u_0) / n`.

    A two species space (mixture) carries a trailing species axis
    in all node based arrays.
    Each species has its own bounds, but all share the same shape.

    Parameters
    ----------
    lower : :obj:`~numpy.array` [:obj:`float`]
        Lower bounds for each velocity dimension.
        Array of shape (ndim,) or (nspc, ndim) for mixtures.
    upper : :obj:`~numpy.array` [:obj:`float`]
        Upper bounds, same shape as lower.
    shape : :obj:`~numpy.array` [:obj:`int`]
        Number of physical nodes per dimension.
    rule : :obj:`str`, optional
        Quadrature rule, either "rectangle" or "newton".
    ghosts : :obj:`int` or :obj:`~numpy.array` [:obj:`int`], optional
        Number of ghost nodes added on each side of each dimension.

    Attributes
    ----------
    ndim : :obj:`int`
        Number of velocity dimensions.
    nspc : :obj:`int`
        Number of species, 1 for single species spaces.
    is_mixture : :obj:`bool`
    nodes : :obj:`~numpy.array` [:obj:`float`]
        Node centers. Array of shape (ndim,) + :attr:`node_shape`.
    widths : :obj:`~numpy.array` [:obj:`float`]
        Node widths, same shape as :attr:`nodes`.
    weights : :obj:`~numpy.array` [:obj:`float`]
        Quadrature weights. Array of shape :attr:`node_shape`.
    """
    def __init__(self,
                 lower,
                 upper,
                 shape,
                 rule="rectangle",
                 ghosts=0):
        self.lower = np.array(lower, dtype=float)
        self.upper = np.array(upper, dtype=float)
        self.shape = np.array(shape, dtype=int).reshape(-1)
        self.rule = str(rule)
        self.ghosts = np.zeros(self.shape.size, dtype=int) + np.array(ghosts,
                                                                       dtype=int)
        if self.rule in bk.DECLARED_QUADRATURES:
            raise NotImplementedError(
                "unsupported quadrature rule {}".format(self.rule))
        if self.rule not in bk.SUPP_QUADRATURES:
            raise ValueError("invalid quadrature rule {}".format(self.rule))

        self.ndim = int(self.shape.size)
        self.is_mixture = bool(self.lower.ndim == 2)
        if self.is_mixture:
            self.nspc = int(self.lower.shape[0])
            nodes, widths, weights = zip(*[self._build(self.lower[s],
                                                       self.upper[s])
                                           for s in range(self.nspc)])
            self.nodes = np.stack(nodes, axis=-1)
            self.widths = np.stack(widths, axis=-1)
            self.weights = np.stack(weights, axis=-1)
        else:
            self.nspc = 1
            self.nodes, self.widths, self.weights = self._build(self.lower,
                                                                self.upper)
        self.check_integrity()
        return

    def _build(self, lower, upper):
        nodes = []
        widths = []
        weights = []
        for d in range(self.ndim):
            n = self.shape[d]
            ng = self.ghosts[d]
            delta = (upper[d] - lower[d]) / n
            idx = np.arange(1 - ng, n + ng + 1)
            nodes.append(lower[d] + (idx - 0.5) * delta)
            widths.append(np.full(idx.size, delta))
            if self.rule == "newton":
                num = n + 2 * ng
                coefficients = np.array([newton_cotes(i, num)
                                         for i in range(1, num + 1)])
            else:
                coefficients = np.ones(idx.size)
            weights.append(coefficients * delta)
        nodes = np.array(np.meshgrid(*nodes, indexing="ij"))
        widths = np.array(np.meshgrid(*widths, indexing="ij"))
        # the weight of a node is the product of its axis weights
        weights = np.prod(np.meshgrid(*weights, indexing="ij"), axis=0)
        return nodes, widths, weights

    #####################################
    #           Properties              #
    #####################################
    @property
    def node_shape(self):
        """:obj:`tuple` [:obj:`int`] :
        Shape of node based arrays, ghost nodes and species included."""
        return self.weights.shape

    @property
    def size(self):
        return self.weights.size

    @property
    def axes(self):
        """:obj:`tuple` [:obj:`~numpy.array` [:obj:`float`]] :
        The node centers of each dimension, e.g. (u, v, w)."""
        return tuple(self.nodes[d] for d in range(self.ndim))

    @property
    def u(self):
        return self.nodes[0]

    @property
    def v(self):
        return self.nodes[1]

    @property
    def w(self):
        return self.nodes[2]

    @property
    def du(self):
        return self.widths[0]

    @property
    def dv(self):
        return self.widths[1]

    @property
    def dw(self):
        return self.widths[2]

    @staticmethod
    def parameters():
        return {"lower",
                "upper",
                "shape",
                "rule",
                "ghosts"}

    @staticmethod
    def attributes():
        attrs = VelocitySpace.parameters()
        attrs.update({"ndim",
                      "nspc",
                      "is_mixture",
                      "nodes",
                      "widths",
                      "weights"})
        return attrs

    def subspaces(self, s=None):
        """Return the single species spaces of a mixture space.

        Parameters
        ----------
        s : :obj:`int`, optional
            If given, only the space of species s is returned.

        Returns
        -------
        spaces : :obj:`list` [:class:`VelocitySpace`] or :class:`VelocitySpace`
        """
        if not self.is_mixture:
            spaces = [self]
        else:
            spaces = [VelocitySpace(self.lower[i],
                                    self.upper[i],
                                    self.shape,
                                    self.rule,
                                    self.ghosts)
                      for i in range(self.nspc)]
        if s is None:
            return spaces
        return spaces[s]

    #####################################
    #           Verification            #
    #####################################
    def check_integrity(self):
        bk.BaseClass.check_integrity(self)
        assert self.rule in bk.SUPP_QUADRATURES
        assert self.ndim in [1, 2, 3]
        assert self.shape.shape == (self.ndim,)
        assert np.all(self.shape > 0)
        assert self.ghosts.shape == (self.ndim,)
        assert np.all(self.ghosts >= 0)
        if self.is_mixture:
            assert self.lower.shape == (self.nspc, self.ndim)
        else:
            assert self.lower.shape == (self.ndim,)
        assert self.upper.shape == self.lower.shape
        assert np.all(self.upper > self.lower)
        assert self.nodes.shape == (self.ndim,) + self.weights.shape
        assert self.widths.shape == self.nodes.shape
        assert np.all(self.weights > 0)

    def __str__(self):
        return ("VelocitySpace: ndim = {}, nspc = {}, rule = {}, "
                "shape = {}, ghosts = {}".format(self.ndim, self.nspc,
                                                 self.rule, self.shape,
                                                 self.ghosts))
