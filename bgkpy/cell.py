import numpy as np

import bgkpy as bk


class Distribution:
    """Named distribution function arrays of a single cell or face.

    The stored fields are fixed by the
    :class:`~bgkpy.constants.DistributionModel` tag.
    Fields are accessed by name, e.g. ``dist["h"]``,
    each field is an independent array.

    Parameters
    ----------
    model : :class:`~bgkpy.constants.DistributionModel` or :obj:`str`
    **fields : :obj:`~numpy.array` [:obj:`float`]
        One array per field name of the model. All of equal shape.
    """
    def __init__(self, model, **fields):
        self.model = bk.DistributionModel.get(model)
        if set(fields.keys()) != set(self.model.fields):
            raise ValueError(
                "a {} distribution needs the fields {}, got {}".format(
                    self.model.label, self.model.fields,
                    tuple(fields.keys())))
        self.fields = {name: np.array(fields[name], dtype=float)
                       for name in self.model.fields}
        shapes = {arr.shape for arr in self.fields.values()}
        assert len(shapes) == 1, "all fields must have equal shapes"
        return

    @staticmethod
    def zeros(model, shape):
        model = bk.DistributionModel.get(model)
        return Distribution(model, **{name: np.zeros(shape)
                                      for name in model.fields})

    @property
    def shape(self):
        return self.fields[self.model.fields[0]].shape

    def __getitem__(self, name):
        return self.fields[name]

    def __setitem__(self, name, value):
        self.fields[name][...] = value

    def __iter__(self):
        return iter(self.model.fields)

    def items(self):
        return [(name, self.fields[name]) for name in self.model.fields]

    def copy(self):
        return Distribution(self.model, **self.fields)

    def __str__(self):
        return "Distribution {} of shape {}".format(self.model.label,
                                                    self.shape)


# noinspection PyPep8Naming
def equilibrium_distribution(model, vs, prim, K=0.0, Kr=0.0):
    r"""Build the equilibrium distribution of a primitive state.

    Parameters
    ----------
    model : :class:`~bgkpy.constants.DistributionModel` or :obj:`str`
    vs : :class:`~bgkpy.VelocitySpace`
    prim : :obj:`~numpy.array` [:obj:`float`]
        Primitive state, with species columns for mixture spaces.
        Diatomic (3f1v) states are
        :math:`(\rho, U, \lambda, \lambda_t, \lambda_r)`.
    K : :obj:`float`, optional
        Internal degrees of freedom carried by b.
    Kr : :obj:`float`, optional
        Rotational degrees of freedom, 3f1v only.

    Returns
    -------
    dist : :class:`Distribution`
    """
    M = bk.DistributionModel
    model = M.get(model)
    prim = np.asarray(prim, dtype=float)
    if model == M.F3V1:
        MHT, MBT, MRT = bk.rykov_maxwellian(vs.u, prim, K, Kr)[:3]
        return Distribution(model, h=MHT, b=MBT, r=MRT)
    g = bk.maxwellian(vs.axes, prim)
    lam = prim[-1]
    if model in (M.F1V1, M.F1V2, M.F1V3):
        return Distribution(model, f=g)
    elif model in (M.F2V1, M.F2V2):
        return Distribution(model, h=g, b=g * K / (2.0 * lam))
    elif model == M.F3V2:
        W = prim[3]
        return Distribution(model, h0=g, h1=g * W, h2=g * (W**2 + 0.5 / lam))
    else:
        if prim.ndim == 2:
            Mu, Mv, Mw, _, _ = bk.mixture_gauss_moments(prim)
        else:
            Mu, Mv, Mw, _, _ = bk.gauss_moments(prim)
        return Distribution(model,
                            h0=g,
                            h1=Mv[1] * g,
                            h2=Mw[1] * g,
                            h3=(Mv[2] + Mw[2]) * g)


# noinspection PyPep8Naming
class ControlVolume:
    r"""Mutable state of a single mesh cell.

    Parameters
    ----------
    w : :obj:`~numpy.array` [:obj:`float`]
        Conserved state. Array of shape (nw,) or (nw, nspc).
    prim : :obj:`~numpy.array` [:obj:`float`]
        Primitive state, matching w.
    measure : :obj:`float`
        Length (1D) or area (2D) of the cell.
    pdf : :class:`Distribution`, optional
        The distribution functions.
        Cells without distributions are updated by their conserved
        fluxes alone.
    E, B : :obj:`~numpy.array` [:obj:`float`], optional
        Electric and magnetic field, plasma cells only.
    phi, psi : :obj:`float`, optional
        Divergence cleaning potentials, plasma cells only.
    lorentz : :obj:`~numpy.array` [:obj:`float`], optional
        Lorentz acceleration of each species. Array of shape (3, nspc).
    """
    def __init__(self,
                 w,
                 prim,
                 measure,
                 pdf=None,
                 E=None,
                 B=None,
                 phi=0.0,
                 psi=0.0,
                 lorentz=None):
        self.w = np.array(w, dtype=float)
        self.prim = np.array(prim, dtype=float)
        self.measure = float(measure)
        self.pdf = pdf
        self.E = None if E is None else np.array(E, dtype=float)
        self.B = None if B is None else np.array(B, dtype=float)
        self.phi = float(phi)
        self.psi = float(psi)
        if lorentz is None and self.E is not None:
            lorentz = np.zeros((3,) + self.w.shape[1:])
        self.lorentz = None if lorentz is None else np.array(lorentz,
                                                             dtype=float)
        self.check_integrity()
        return

    @property
    def has_fields(self):
        return self.E is not None

    def check_integrity(self):
        assert self.w.shape[1:] == self.prim.shape[1:]
        assert self.measure > 0
        if self.pdf is not None:
            assert isinstance(self.pdf, Distribution)
        if self.E is not None:
            assert self.E.shape == (3,)
            assert self.B is not None and self.B.shape == (3,)


# noinspection PyPep8Naming
class Interface:
    """Fluxes through a single face.

    All fluxes are integrated over the face and over the time step.

    Parameters
    ----------
    fw : :obj:`~numpy.array` [:obj:`float`]
        Flux of conserved quantities.
    ff : :class:`Distribution`, optional
        Flux of each distribution function.
    femL, femR : :obj:`~numpy.array` [:obj:`float`], optional
        Electromagnetic fluxes (E, B, phi, psi) towards the left
        and the right neighbour cell.
    """
    def __init__(self, fw, ff=None, femL=None, femR=None):
        self.fw = np.array(fw, dtype=float)
        self.ff = ff
        self.femL = None if femL is None else np.array(femL, dtype=float)
        self.femR = None if femR is None else np.array(femR, dtype=float)
        if self.femL is not None:
            assert self.femL.shape == (8,)
            assert self.femR is not None and self.femR.shape == (8,)
        return

    @staticmethod
    def zeros(w_shape, model=None, f_shape=None, em=False):
        """Return an interface without any flux."""
        ff = None
        if model is not None:
            ff = Distribution.zeros(model, f_shape)
        if em:
            return Interface(np.zeros(w_shape), ff, np.zeros(8), np.zeros(8))
        return Interface(np.zeros(w_shape), ff)
