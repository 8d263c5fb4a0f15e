r"""Explicit transport and implicit relaxation of a single cell.

All face fluxes handed to :meth:`CellUpdate.update`
are integrated over the face and over the time step.
The update divides them by the cell measure,
the time step only enters the relaxation and source terms.

Each distribution array is relaxed by

.. math::
    f^{n+1} = \frac{f^n + \Delta F / |\Omega| + \Delta t / \tau \, g}
                   {1 + \Delta t / \tau},

where g is the target of the collision model,
built from the updated conserved state.
"""
import warnings

import numpy as np

import bgkpy as bk


class CellUpdate:
    """Advance cells by one time step.

    The kernel is chosen once, from the distribution model,
    the gas and the collision model.
    Invalid combinations raise a :obj:`ValueError`.

    Parameters
    ----------
    model : :class:`~bgkpy.constants.DistributionModel`, :obj:`str` or None
        The distributions stored in the cells.
        Cells without distributions are updated by their conserved fluxes.
    gas : :class:`~bgkpy.Gas`
        :class:`~bgkpy.Mixture` for two species,
        :class:`~bgkpy.Plasma` for plasma models (3f2v, 4f1v) and
        :class:`~bgkpy.Diatomic` for the Rykov model (3f1v).
    vspace : :class:`~bgkpy.VelocitySpace` or None
    collision : :class:`~bgkpy.constants.Collision` or :obj:`str`, optional
    mhd : :obj:`bool`, optional
        Plasma models only.
        If False, ions and electrons also relax towards each other.
    """
    def __init__(self,
                 model,
                 gas,
                 vspace=None,
                 collision="bgk",
                 mhd=True):
        self.model = None if model is None else bk.DistributionModel.get(model)
        self.gas = gas
        self.vs = vspace
        self.collision = bk.Collision(collision)
        self.mhd = bool(mhd)
        self._kernel = self._select_kernel()
        return

    def _select_kernel(self):
        M = bk.DistributionModel
        gas = self.gas
        is_bgk = self.collision == bk.Collision.BGK
        if self.collision == bk.Collision.RYKOV and self.model != M.F3V1:
            raise ValueError("the rykov model needs 3f1v distributions")
        if self.model is None:
            return self._update_conserved
        if self.vs is None or self.model.nv != self.vs.ndim:
            raise ValueError("{} distributions need a {}D velocity space"
                             "".format(self.model.label, self.model.nv))
        if self.model in (M.F4V1, M.F3V2):
            if not isinstance(gas, bk.Plasma) or not self.vs.is_mixture:
                raise ValueError("{} distributions need a plasma and a mixture"
                                 " velocity space".format(self.model.label))
            if not is_bgk:
                raise ValueError("plasma models only support bgk collisions")
            return self._update_plasma
        if self.model == M.F3V1:
            if not isinstance(gas, bk.Diatomic):
                raise ValueError("3f1v distributions need a diatomic gas")
            if self.collision == bk.Collision.SHAKHOV:
                raise ValueError("diatomic gases support bgk and rykov only")
            return self._update_rykov
        if isinstance(gas, bk.Mixture):
            if self.model not in (M.F2V1, M.F2V2) or not self.vs.is_mixture:
                raise ValueError("mixtures need 2f distributions and a "
                                 "mixture velocity space")
            if not is_bgk:
                raise ValueError("mixtures only support bgk collisions")
            return self._update_mixture
        if self.vs.is_mixture:
            raise ValueError("a single species gas needs a single species "
                             "velocity space")
        if self.model in (M.F1V1, M.F1V2, M.F1V3):
            return self._update_1f
        if self.model in (M.F2V1, M.F2V2):
            return self._update_2f
        raise ValueError("unsupported distribution model {}"
                         "".format(self.model.label))

    #####################################
    #            Interface              #
    #####################################
    # noinspection PyPep8Naming
    def update(self,
               cell,
               faceL,
               faceR,
               dt,
               residual,
               faceD=None,
               faceU=None):
        """Advance a single cell by one time step.

        Parameters
        ----------
        cell : :class:`~bgkpy.ControlVolume`
            Updated in place.
        faceL, faceR : :class:`~bgkpy.Interface`
            Fluxes through the left and right face.
        dt : :obj:`float`
        residual : :class:`~bgkpy.Residual`
            Receives the change of the conserved state.
        faceD, faceU : :class:`~bgkpy.Interface`, optional
            Fluxes through the lower and upper face, 2D cells only.
        """
        faces = [(faceL, 1.0), (faceR, -1.0)]
        if faceD is not None or faceU is not None:
            assert faceD is not None and faceU is not None
            faces += [(faceD, 1.0), (faceU, -1.0)]
        self._kernel(cell, faces, dt, residual)
        return

    #####################################
    #             Helpers               #
    #####################################
    @staticmethod
    def _net_w(faces):
        return sum(sign * face.fw for (face, sign) in faces)

    @staticmethod
    def _net_f(faces, name):
        return sum(sign * face.ff[name] for (face, sign) in faces)

    @staticmethod
    def _relax(f, flux, target, ratio):
        return (f + flux + ratio * target) / (1.0 + ratio)

    def _recover(self, cell, w_old, prim_old, to_prim, rykov=False):
        """Recover the primitive state of each component.

        Components with a non-positive density or temperature
        are rolled back to their previous state.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            prim = to_prim(cell.w)
        if prim.ndim == 1:
            prim = prim[:, np.newaxis]
            w = cell.w[:, np.newaxis]
            w_old = w_old[:, np.newaxis]
            prim_old = prim_old[:, np.newaxis]
        else:
            w = cell.w
        for s in range(prim.shape[1]):
            if not bk.is_physical(prim[:, s], rykov):
                w[:, s] = w_old[:, s]
                prim[:, s] = prim_old[:, s]
                warnings.warn("negative temperature update of component {}"
                              "".format(s + 1),
                              bk.PhysicalStateWarning,
                              stacklevel=3)
        cell.prim = prim.reshape(cell.prim.shape)
        return

    def _collision_time(self, prim):
        return bk.vhs_collision_time(prim, self.gas.mu_ref, self.gas.omega)

    def _aap(self, prim):
        gas = self.gas
        args = (gas.mi, gas.ni, gas.me, gas.ne, gas.Kn)
        tau = bk.aap_hs_collision_time(prim, *args)
        return tau, bk.aap_hs_prim(prim, tau, *args)

    def _aap_source(self, cell, dt):
        """Explicit relaxation of the species towards each other."""
        tau, mprim = self._aap(cell.prim)
        mw = bk.mixture_prim_conserve(mprim, self.gas.gamma)
        cell.w += (mw - cell.w) * dt / tau

    #####################################
    #             Kernels               #
    #####################################
    def _update_conserved(self, cell, faces, dt, residual):
        w_old = np.copy(cell.w)
        prim_old = np.copy(cell.prim)
        cell.w += self._net_w(faces) / cell.measure
        self._recover(cell, w_old, prim_old,
                      lambda w: bk.conserve_prim(w, self.gas.gamma))
        residual.accumulate(w_old, cell.w)
        return

    def _update_1f(self, cell, faces, dt, residual):
        vs = self.vs
        pdf = cell.pdf
        w_old = np.copy(cell.w)
        prim_old = np.copy(cell.prim)
        # the heat flux correction uses the state before the flux
        S = 0.0
        if self.collision == bk.Collision.SHAKHOV:
            M_old = bk.maxwellian(vs.axes, prim_old)
            q = bk.heat_flux(pdf, prim_old, vs)
            S = bk.shakhov(vs.axes, M_old, q, prim_old, self.gas.Pr)

        cell.w += self._net_w(faces) / cell.measure
        self._recover(cell, w_old, prim_old,
                      lambda w: bk.conserve_prim(w, self.gas.gamma))
        residual.accumulate(w_old, cell.w)

        M = bk.maxwellian(vs.axes, cell.prim) + S
        ratio = dt / self._collision_time(cell.prim)
        pdf["f"] = self._relax(pdf["f"],
                               self._net_f(faces, "f") / cell.measure,
                               M, ratio)
        return

    # noinspection PyPep8Naming
    def _update_2f(self, cell, faces, dt, residual):
        vs = self.vs
        pdf = cell.pdf
        K = self.gas.K
        w_old = np.copy(cell.w)
        prim_old = np.copy(cell.prim)
        SH = SB = 0.0
        if self.collision == bk.Collision.SHAKHOV:
            MH_old = bk.maxwellian(vs.axes, prim_old)
            MB_old = MH_old * K / (2.0 * prim_old[-1])
            q = bk.heat_flux(pdf, prim_old, vs)
            SH, SB = bk.shakhov_internal(vs.axes, MH_old, MB_old, q,
                                         prim_old, self.gas.Pr, K)

        cell.w += self._net_w(faces) / cell.measure
        self._recover(cell, w_old, prim_old,
                      lambda w: bk.conserve_prim(w, self.gas.gamma))
        residual.accumulate(w_old, cell.w)

        MH = bk.maxwellian(vs.axes, cell.prim)
        MB = MH * K / (2.0 * cell.prim[-1])
        ratio = dt / self._collision_time(cell.prim)
        for (name, target) in [("h", MH + SH), ("b", MB + SB)]:
            pdf[name] = self._relax(pdf[name],
                                    self._net_f(faces, name) / cell.measure,
                                    target, ratio)
        return

    # noinspection PyPep8Naming
    def _update_mixture(self, cell, faces, dt, residual):
        vs = self.vs
        pdf = cell.pdf
        gamma = self.gas.gamma
        w_old = np.copy(cell.w)
        prim_old = np.copy(cell.prim)

        def to_prim(w):
            return bk.mixture_conserve_prim(w, gamma)

        cell.w += self._net_w(faces) / cell.measure
        self._recover(cell, w_old, prim_old, to_prim)
        self._aap_source(cell, dt)
        self._recover(cell, w_old, prim_old, to_prim)
        residual.accumulate(w_old, cell.w)

        tau, mprim = self._aap(cell.prim)
        H = bk.mixture_maxwellian(vs.axes, mprim)
        B = H * self.gas.K / (2.0 * mprim[-1])
        ratio = dt / tau
        for (name, target) in [("h", H), ("b", B)]:
            pdf[name] = self._relax(pdf[name],
                                    self._net_f(faces, name) / cell.measure,
                                    target, ratio)
        return

    # noinspection PyPep8Naming
    def _update_rykov(self, cell, faces, dt, residual):
        vs = self.vs
        gas = self.gas
        pdf = cell.pdf
        u = vs.u
        K = gas.K
        Kr = gas.Kr
        w_old = np.copy(cell.w)
        prim_old = np.copy(cell.prim)
        if self.collision == bk.Collision.RYKOV:
            q = bk.heat_flux(pdf, prim_old, vs)
        else:
            q = np.zeros(2)

        cell.w += self._net_w(faces) / cell.measure
        # explicit rotational energy relaxation
        maxwellians = bk.rykov_maxwellian(u, prim_old, K, Kr)
        tau_old = self._collision_time(prim_old[:4])
        Zr = bk.rykov_zr(1.0 / prim_old[3], gas.T0, gas.Z0)
        Er0 = 0.5 * np.sum(vs.weights * (maxwellians[5] / Zr
                                         + (1.0 - 1.0 / Zr) * maxwellians[2]))
        cell.w[3] += dt * (Er0 - w_old[3]) / tau_old
        self._recover(cell, w_old, prim_old,
                      lambda w: bk.conserve_prim_rykov(w, K, Kr),
                      rykov=True)
        residual.accumulate(w_old, cell.w)

        maxwellians = bk.rykov_maxwellian(u, cell.prim, K, Kr)
        if self.collision == bk.Collision.RYKOV:
            corrections = bk.rykov(u, maxwellians, q, cell.prim, gas.Pr,
                                   K, Kr, gas.sigma, gas.omega0, gas.omega1)
        else:
            corrections = (0.0,) * 6
        ratio = dt / self._collision_time(cell.prim[:4])
        for (i, name) in enumerate(["h", "b", "r"]):
            target = ((1.0 - 1.0 / Zr) * (maxwellians[i] + corrections[i])
                      + 1.0 / Zr * (maxwellians[i + 3]
                                    + corrections[i + 3]))
            pdf[name] = self._relax(pdf[name],
                                    self._net_f(faces, name) / cell.measure,
                                    target, ratio)
        return

    # noinspection PyPep8Naming
    def _update_plasma(self, cell, faces, dt, residual):
        vs = self.vs
        gas = self.gas
        pdf = cell.pdf
        gamma = gas.gamma
        M = bk.DistributionModel
        w_old = np.copy(cell.w)
        prim_old = np.copy(cell.prim)

        def to_prim(w):
            return bk.mixture_conserve_prim(w, gamma)

        # fields
        faceL = faces[0][0]
        faceR = faces[1][0]
        fem = (faceL.femR + faceR.femL) / cell.measure
        cell.E -= fem[0:3]
        cell.B -= fem[3:6]
        cell.phi -= fem[6]
        cell.psi -= fem[7]
        has_valid_fields = not bk.has_nan_fields(cell.E, cell.B)
        if not has_valid_fields:
            warnings.warn("NaN electromagnetic field state, "
                          "the Lorentz force is skipped",
                          bk.FieldStateWarning,
                          stacklevel=3)

        # flow
        cell.w += self._net_w(faces) / cell.measure
        self._recover(cell, w_old, prim_old, to_prim)
        if not self.mhd:
            self._aap_source(cell, dt)
            self._recover(cell, w_old, prim_old, to_prim)

        # electromagnetic source
        if has_valid_fields:
            x = bk.solve_em(cell.prim, cell.E, cell.B,
                            gas.mr, gas.lD, gas.rL, dt)
            cell.lorentz = bk.lorentz_force(x, cell.prim, cell.E, cell.B,
                                            gas.mr, gas.rL)
            cell.E = x[0:3]
            cell.prim[1:4, 0] = x[3:6]
            cell.prim[1:4, 1] = x[6:9]
            cell.w = bk.mixture_prim_conserve(cell.prim, gamma)
        else:
            cell.lorentz = np.zeros((3, vs.nspc))
        residual.accumulate(w_old, cell.w)

        # distributions
        fields = {name: pdf[name] + self._net_f(faces, name) / cell.measure
                  for name in pdf}
        shifted_axes = [0] if self.model == M.F4V1 else [0, 1]
        for s in range(vs.nspc):
            for d in shifted_axes:
                width = vs.widths[d][..., s].flat[0]
                for name in fields:
                    fields[name][..., s] = bk.shift_pdf(
                        fields[name][..., s], cell.lorentz[d, s],
                        width, dt, axis=d)
        # velocity components that are not discretized
        ac = cell.lorentz * dt
        h0 = fields["h0"]
        if self.model == M.F4V1:
            fields["h3"] += (2.0 * ac[1] * fields["h1"] + ac[1]**2 * h0
                             + 2.0 * ac[2] * fields["h2"] + ac[2]**2 * h0)
            fields["h2"] += ac[2] * h0
            fields["h1"] += ac[1] * h0
        else:
            fields["h2"] += 2.0 * ac[2] * fields["h1"] + ac[2]**2 * h0
            fields["h1"] += ac[2] * h0

        tau, mprim = self._aap(cell.prim)
        if self.mhd:
            mprim = cell.prim
        targets = bk.equilibrium_distribution(self.model, vs, mprim)
        ratio = dt / tau
        for name in fields:
            pdf[name] = self._relax(fields[name], 0.0, targets[name], ratio)
        return
