r"""First order kinetic fluxes through axis aligned faces.

The returned :class:`~bgkpy.Interface` objects hold fluxes integrated
over the face length and the time step,
positive in the direction of the face normal (increasing coordinate).
"""
import numpy as np

import bgkpy as bk


def flux_kfvs(fL, fR, vs, axis, dt, length=1.0):
    """Kinetic flux vector splitting of upwind states.

    Parameters
    ----------
    fL, fR : :class:`~bgkpy.Distribution`
        Distributions on the left and the right side of the face.
    vs : :class:`~bgkpy.VelocitySpace`
    axis : :obj:`int`
        Velocity axis normal to the face.
    dt : :obj:`float`
    length : :obj:`float`, optional
        Face length (2D), 1 in 1D.

    Returns
    -------
    face : :class:`~bgkpy.Interface`
    """
    assert fL.model == fR.model
    un = vs.nodes[axis]
    fields = {name: dt * length * un * np.where(un > 0, fL[name], fR[name])
              for name in fL}
    ff = bk.Distribution(fL.model, **fields)
    return bk.Interface(bk.conserved_moments(ff, vs), ff)


# noinspection PyPep8Naming
def flux_boundary_maxwell(bc_prim, f_inner, vs, axis, side, dt,
                          length=1.0, K=None):
    r"""Flux through a diffusely reflecting wall.

    Particles leaving the wall follow the wall Maxwellian,
    its density is chosen such that no mass passes the wall.

    Parameters
    ----------
    bc_prim : :obj:`~numpy.array` [:obj:`float`]
        Primitive state of the wall, its density is ignored.
        Mixture spaces accept a shared state or one column per species.
    f_inner : :class:`~bgkpy.Distribution`
        Distribution of the adjacent cell.
    vs : :class:`~bgkpy.VelocitySpace`
    axis : :obj:`int`
        Velocity axis normal to the wall.
    side : :obj:`int`
        +1 if the gas lies on the side of increasing coordinates
        (left or lower wall), -1 otherwise.
    dt : :obj:`float`
    length : :obj:`float`, optional
    K : :obj:`float`, optional
        Internal degrees of freedom, required for 2f distributions.

    Returns
    -------
    face : :class:`~bgkpy.Interface`
    """
    M = bk.DistributionModel
    if f_inner.model in (M.F1V1, M.F1V2, M.F1V3):
        pass
    elif f_inner.model in (M.F2V1, M.F2V2):
        if K is None:
            raise ValueError("2f wall fluxes need internal degrees of freedom")
    else:
        raise NotImplementedError("no wall flux for {} distributions"
                                  "".format(f_inner.model.label))
    unit_prim = np.array(bc_prim, dtype=float)
    unit_prim[0] = 1.0
    un = vs.nodes[axis]
    emitted = side * un > 0
    first = f_inner[f_inner.model.fields[0]]
    wall = {"f": bk.maxwellian(vs.axes, unit_prim)}
    wall["h"] = wall["f"]
    if K is not None:
        wall["b"] = wall["f"] * K / (2.0 * unit_prim[-1])
    # sum over the velocity axes only, mixtures keep one density per species
    velocity_axes = tuple(range(vs.ndim))
    incident = np.sum(vs.weights * un * np.where(emitted, 0.0, first),
                      axis=velocity_axes)
    outgoing = np.sum(vs.weights * un * np.where(emitted, wall["f"], 0.0),
                      axis=velocity_axes)
    rho = -incident / outgoing
    fields = {name: dt * length * un * np.where(emitted,
                                                rho * wall[name],
                                                f_inner[name])
              for name in f_inner}
    ff = bk.Distribution(f_inner.model, **fields)
    return bk.Interface(bk.conserved_moments(ff, vs), ff)
