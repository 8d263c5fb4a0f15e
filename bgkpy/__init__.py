from bgkpy.constants import SUPP_QUADRATURES
from bgkpy.constants import DECLARED_QUADRATURES
from bgkpy.constants import NEWTON_COTES
from bgkpy.constants import RESIDUAL_EPSILON
from bgkpy.constants import MAX_MOMENT_ORDER
from bgkpy.constants import Collision
from bgkpy.constants import DistributionModel
from bgkpy.exceptions import PhysicalStateWarning
from bgkpy.exceptions import FieldStateWarning
from bgkpy.BaseClass import BaseClass
from bgkpy.velocity import VelocitySpace
from bgkpy.velocity import newton_cotes
from bgkpy.gas import Gas
from bgkpy.gas import Mixture
from bgkpy.gas import Plasma
from bgkpy.gas import Diatomic
from bgkpy.cell import Distribution
from bgkpy.cell import ControlVolume
from bgkpy.cell import Interface
from bgkpy.cell import equilibrium_distribution
from bgkpy.state import heat_capacity_ratio
from bgkpy.state import prim_conserve
from bgkpy.state import conserve_prim
from bgkpy.state import mixture_prim_conserve
from bgkpy.state import mixture_conserve_prim
from bgkpy.state import prim_conserve_rykov
from bgkpy.state import conserve_prim_rykov
from bgkpy.state import is_physical
from bgkpy.moments import discrete_moment
from bgkpy.moments import conserved_moments
from bgkpy.moments import gauss_moments
from bgkpy.moments import mixture_gauss_moments
from bgkpy.moments import gauss_conserved_moments
from bgkpy.moments import gauss_conserved_slope
from bgkpy.moments import pressure
from bgkpy.moments import distribution_pressure
from bgkpy.moments import stress
from bgkpy.moments import heat_flux
from bgkpy.equilibrium import maxwellian
from bgkpy.equilibrium import mixture_maxwellian
from bgkpy.equilibrium import ref_vhs_vis
from bgkpy.equilibrium import vhs_collision_time
from bgkpy.equilibrium import aap_hs_collision_time
from bgkpy.equilibrium import aap_hs_prim
from bgkpy.equilibrium import shakhov
from bgkpy.equilibrium import shakhov_internal
from bgkpy.equilibrium import rykov_zr
from bgkpy.equilibrium import rykov_maxwellian
from bgkpy.equilibrium import rykov
from bgkpy.closure import moment_basis
from bgkpy.closure import optimize_closure
from bgkpy.closure import realizable_reconstruct
from bgkpy.closure import sample_pdf
from bgkpy.electromagnetic import cross_matrix
from bgkpy.electromagnetic import em_coefficients
from bgkpy.electromagnetic import solve_em
from bgkpy.electromagnetic import lorentz_force
from bgkpy.electromagnetic import shift_pdf
from bgkpy.electromagnetic import has_nan_fields
from bgkpy.residual import Residual
from bgkpy.flux import flux_kfvs
from bgkpy.flux import flux_boundary_maxwell
from bgkpy.step import CellUpdate
