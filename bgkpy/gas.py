import numpy as np

import bgkpy as bk


# noinspection PyPep8Naming
class Gas(bk.BaseClass):
    r"""Material properties of a single species gas.

    Parameters
    ----------
    Kn : :obj:`float`
        Knudsen number.
    Pr : :obj:`float`, optional
        Prandtl number, used by the Shakhov and Rykov corrections.
    K : :obj:`float`, optional
        Number of internal degrees of freedom,
        including the velocity dimensions that are not discretized.
    gamma : :obj:`float`, optional
        Heat capacity ratio.
    omega : :obj:`float`, optional
        Viscosity temperature exponent of the VHS model.
    alpha_ref : :obj:`float`, optional
        Reference VHS scattering parameter.
    omega_ref : :obj:`float`, optional
        Reference VHS temperature exponent.
    mu_ref : :obj:`float`, optional
        Reference viscosity.
        Computed by :func:`~bgkpy.equilibrium.ref_vhs_vis`, if not given.
    """
    def __init__(self,
                 Kn,
                 Pr=2 / 3,
                 K=2.0,
                 gamma=5 / 3,
                 omega=0.81,
                 alpha_ref=1.0,
                 omega_ref=0.5,
                 mu_ref=None):
        self.Kn = float(Kn)
        self.Pr = float(Pr)
        self.K = float(K)
        self.gamma = float(gamma)
        self.omega = float(omega)
        self.alpha_ref = float(alpha_ref)
        self.omega_ref = float(omega_ref)
        if mu_ref is None:
            mu_ref = bk.ref_vhs_vis(self.Kn, self.alpha_ref, self.omega_ref)
        self.mu_ref = float(mu_ref)
        Gas.check_integrity(self)
        return

    @staticmethod
    def parameters():
        return {"Kn",
                "Pr",
                "K",
                "gamma",
                "omega",
                "alpha_ref",
                "omega_ref",
                "mu_ref"}

    @staticmethod
    def attributes():
        return Gas.parameters()

    def check_integrity(self):
        bk.BaseClass.check_integrity(self)
        assert self.Kn > 0
        assert self.Pr > 0
        assert self.K >= 0
        assert self.gamma > 1
        assert self.mu_ref > 0


# noinspection PyPep8Naming
class Mixture(Gas):
    """Two species gas, e.g. ions and electrons.

    Parameters
    ----------
    mi, me : :obj:`float`
        Masses of the first (ion) and second (electron) species.
    ni, ne : :obj:`float`
        Reference number densities of both species.
    """
    def __init__(self,
                 Kn,
                 mi=1.0,
                 ni=0.5,
                 me=1.0,
                 ne=0.5,
                 **kwargs):
        self.mi = float(mi)
        self.ni = float(ni)
        self.me = float(me)
        self.ne = float(ne)
        Gas.__init__(self, Kn, **kwargs)
        Mixture.check_integrity(self)
        return

    @property
    def masses(self):
        """:obj:`~numpy.array` [:obj:`float`] : The species masses."""
        return np.array([self.mi, self.me])

    @property
    def mr(self):
        """:obj:`float` : Mass ratio of ions and electrons."""
        return self.mi / self.me

    @staticmethod
    def parameters():
        params = Gas.parameters()
        params.update({"mi", "ni", "me", "ne"})
        return params

    @staticmethod
    def attributes():
        attrs = Mixture.parameters()
        attrs.update({"masses", "mr"})
        return attrs

    def check_integrity(self):
        Gas.check_integrity(self)
        assert self.mi > 0 and self.me > 0
        assert self.ni > 0 and self.ne > 0


# noinspection PyPep8Naming
class Plasma(Mixture):
    """Two species plasma with electromagnetic coupling.

    Parameters
    ----------
    lD : :obj:`float`
        Normalized Debye length.
    rL : :obj:`float`
        Normalized Larmor radius.
    """
    def __init__(self,
                 Kn,
                 lD=0.01,
                 rL=0.003,
                 **kwargs):
        self.lD = float(lD)
        self.rL = float(rL)
        Mixture.__init__(self, Kn, **kwargs)
        Plasma.check_integrity(self)
        return

    @staticmethod
    def parameters():
        params = Mixture.parameters()
        params.update({"lD", "rL"})
        return params

    @staticmethod
    def attributes():
        attrs = Plasma.parameters()
        attrs.update({"masses", "mr"})
        return attrs

    def check_integrity(self):
        Mixture.check_integrity(self)
        assert self.lD > 0
        assert self.rL > 0


# noinspection PyPep8Naming
class Diatomic(Gas):
    """Diatomic gas with rotational relaxation (Rykov model).

    Parameters
    ----------
    Kr : :obj:`float`
        Number of rotational degrees of freedom.
    T0 : :obj:`float`
        Reference temperature of the rotational collision number.
    Z0 : :obj:`float`
        Limiting rotational collision number.
    sigma, omega0, omega1 : :obj:`float`
        Rykov model constants.
    """
    def __init__(self,
                 Kn,
                 Kr=2.0,
                 T0=91.5 / 273.0,
                 Z0=18.1,
                 sigma=1 / 1.55,
                 omega0=0.2354,
                 omega1=0.3049,
                 **kwargs):
        self.Kr = float(Kr)
        self.T0 = float(T0)
        self.Z0 = float(Z0)
        self.sigma = float(sigma)
        self.omega0 = float(omega0)
        self.omega1 = float(omega1)
        Gas.__init__(self, Kn, **kwargs)
        Diatomic.check_integrity(self)
        return

    @staticmethod
    def parameters():
        params = Gas.parameters()
        params.update({"Kr", "T0", "Z0", "sigma", "omega0", "omega1"})
        return params

    @staticmethod
    def attributes():
        return Diatomic.parameters()

    def check_integrity(self):
        Gas.check_integrity(self)
        assert self.Kr > 0
        assert self.T0 > 0
        assert self.Z0 > 0
