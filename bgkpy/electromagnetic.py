r"""Electromagnetic coupling of two species plasmas.

The electric field and the bulk velocities of ions and electrons
are advanced together by a Crank-Nicolson step,
which results in a 9 x 9 linear system.
Densities are normalized with the ion mass,
such that :math:`n_i = \rho_i` and :math:`n_e = \rho_e \, m_i / m_e`.
"""
import numpy as np
import scipy.linalg


def cross_matrix(B):
    r"""Return the matrix X with :math:`X \cdot U = U \times B`."""
    return np.array([[0.0, B[2], -B[1]],
                     [-B[2], 0.0, B[0]],
                     [B[1], -B[0], 0.0]])


# noinspection PyPep8Naming
def em_coefficients(prim, E, B, mr, lD, rL, dt):
    r"""Assemble the linear system of the electromagnetic source step.

    The unknowns are :math:`x = (E', U_i', U_e')`.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (5, 2): :math:`(\rho, U, V, W, \lambda)`
        of ions and electrons.
    E, B : :obj:`~numpy.array` [:obj:`float`]
        Electric and magnetic field.
    mr : :obj:`float`
        Mass ratio of ions and electrons.
    lD, rL : :obj:`float`
        Debye length and Larmor radius.
    dt : :obj:`float`

    Returns
    -------
    A : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (9, 9).
    b : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (9,).
    """
    prim = np.asarray(prim, dtype=float)
    E = np.asarray(E, dtype=float)
    ni = prim[0, 0]
    ne = prim[0, 1] * mr
    Ui = prim[1:4, 0]
    Ue = prim[1:4, 1]
    X = cross_matrix(B)
    eye = np.eye(3)
    c = dt / (2.0 * lD**2 * rL)
    a = dt / (2.0 * rL)

    A = np.zeros((9, 9))
    b = np.zeros(9)
    # Ampere's law
    A[0:3, 0:3] = eye
    A[0:3, 3:6] = c * ni * eye
    A[0:3, 6:9] = -c * ne * eye
    b[0:3] = E - c * (ni * Ui - ne * Ue)
    # ions
    A[3:6, 0:3] = -a * eye
    A[3:6, 3:6] = eye - a * X
    b[3:6] = Ui + a * (E + X @ Ui)
    # electrons
    A[6:9, 0:3] = a * mr * eye
    A[6:9, 6:9] = eye + a * mr * X
    b[6:9] = Ue - a * mr * (E + X @ Ue)
    return A, b


# noinspection PyPep8Naming
def solve_em(prim, E, B, mr, lD, rL, dt):
    """Solve the system of :func:`em_coefficients`.

    Returns
    -------
    x : :obj:`~numpy.array` [:obj:`float`]
        New electric field, ion and electron velocity.
    """
    A, b = em_coefficients(prim, E, B, mr, lD, rL, dt)
    return scipy.linalg.solve(A, b)


# noinspection PyPep8Naming
def lorentz_force(x, prim, E, B, mr, rL):
    """Time averaged Lorentz acceleration of both species.

    Parameters
    ----------
    x : :obj:`~numpy.array` [:obj:`float`]
        Solution of :func:`solve_em`.
    prim : :obj:`~numpy.array` [:obj:`float`]
        State before the source step.
    E, B : :obj:`~numpy.array` [:obj:`float`]
        Fields before the source step.
    mr, rL : :obj:`float`

    Returns
    -------
    force : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (3, 2).
    """
    prim = np.asarray(prim, dtype=float)
    field = x[0:3] + E
    force = np.empty((3, 2))
    force[:, 0] = 0.5 * (field + np.cross(prim[1:4, 0] + x[3:6], B)) / rL
    force[:, 1] = (-0.5 * (field + np.cross(prim[1:4, 1] + x[6:9], B))
                   * mr / rL)
    return force


def shift_pdf(f, a, du, dt, axis=0):
    """Shift a distribution along a velocity axis by a * dt.

    Whole node widths are shifted exactly,
    the remaining fraction by a first order upwind interpolation.
    Mass shifted beyond the last node is lost,
    the first node receives nothing.

    Parameters
    ----------
    f : :obj:`~numpy.array` [:obj:`float`]
    a : :obj:`float`
        Acceleration.
    du : :obj:`float`
        Node width along axis.
    dt : :obj:`float`
    axis : :obj:`int`, optional

    Returns
    -------
    shifted : :obj:`~numpy.array` [:obj:`float`]
    """
    f = np.moveaxis(np.asarray(f, dtype=float), axis, 0)
    distance = abs(a) * dt / du
    nodes = int(np.floor(distance))
    fraction = distance - nodes
    if a < 0:
        f = f[::-1]
    shifted = np.zeros(f.shape)
    if nodes < f.shape[0]:
        shifted[nodes:] = f[:f.shape[0] - nodes]
    result = np.copy(shifted)
    result[1:] -= fraction * (shifted[1:] - shifted[:-1])
    result[0] -= fraction * shifted[0]
    if a < 0:
        result = result[::-1]
    return np.ascontiguousarray(np.moveaxis(result, 0, axis))


# noinspection PyPep8Naming
def has_nan_fields(E, B):
    return bool(np.any(np.isnan(E)) or np.any(np.isnan(B)))
