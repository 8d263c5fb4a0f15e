from enum import Enum

#: :obj:`set` [:obj:`str`] :
#: Set of all currently supported quadrature rules
#: for :class:`~bgkpy.VelocitySpace`.
SUPP_QUADRATURES = {"rectangle",
                    "newton"}

#: :obj:`set` [:obj:`str`] :
#: Quadrature rules that are known, but not available yet.
DECLARED_QUADRATURES = {"gauss"}

#: :obj:`dict` [:obj:`str`, :obj:`float`] :
#: Composite Newton-Cotes (Boole) coefficients.
#: The endpoints take *boundary*,
#: the inner nodes cycle through *odd*, *even* and *center*.
NEWTON_COTES = {"boundary": 14 / 45,
                "even": 28 / 45,
                "center": 24 / 45,
                "odd": 64 / 45}

#: :obj:`float` :
#: Added to the residual normalization, avoids division by zero.
RESIDUAL_EPSILON = 1e-7

#: :obj:`int` :
#: Highest order of the analytic Maxwellian moments,
#: see :func:`~bgkpy.moments.gauss_moments`.
MAX_MOMENT_ORDER = 6


class Collision(Enum):
    """Relaxation model of the collision operator."""
    BGK = "bgk"
    SHAKHOV = "shakhov"
    RYKOV = "rykov"


class DistributionModel(Enum):
    """Tag of the distribution functions stored in a cell.

    The value is ``(name, fields, nv)``:
    the field names of the stored arrays
    and the number of discretized velocity dimensions.
    """
    F1V1 = ("1f1v", ("f",), 1)
    F1V2 = ("1f2v", ("f",), 2)
    F1V3 = ("1f3v", ("f",), 3)
    F2V1 = ("2f1v", ("h", "b"), 1)
    F2V2 = ("2f2v", ("h", "b"), 2)
    # diatomic gas, the rotational energy is carried by r
    F3V1 = ("3f1v", ("h", "b", "r"), 1)
    # reduced in w
    F3V2 = ("3f2v", ("h0", "h1", "h2"), 2)
    # reduced in v and w
    F4V1 = ("4f1v", ("h0", "h1", "h2", "h3"), 1)

    @property
    def label(self):
        return self.value[0]

    @property
    def fields(self):
        return self.value[1]

    @property
    def nf(self):
        return len(self.value[1])

    @property
    def nv(self):
        return self.value[2]

    @staticmethod
    def get(model):
        """Look up a member by itself or by its label, e.g. ``"2f1v"``.

        Parameters
        ----------
        model : :class:`DistributionModel` or :obj:`str`

        Returns
        -------
        model : :class:`DistributionModel`
        """
        if isinstance(model, DistributionModel):
            return model
        for member in DistributionModel:
            if member.label == model:
                return member
        raise ValueError("unknown distribution model {}".format(model))
