import h5py
import numpy as np
import pytest

import bgkpy.helpers.tests as test_helper
import bgkpy as bk

###################################
#           Setup Cases           #
###################################
CONFIGS = dict()
CONFIGS["Gas/default"] = bk.Gas(Kn=0.05)
CONFIGS["Gas/cavity"] = bk.Gas(Kn=0.075, Pr=2 / 3, K=1.0,
                               gamma=bk.heat_capacity_ratio(1.0, 2),
                               omega=0.72)
CONFIGS["Mixture"] = bk.Mixture(Kn=1.0, mi=1.0, ni=0.5, me=0.0005, ne=0.5)
CONFIGS["Plasma"] = bk.Plasma(Kn=1e-3, lD=0.01, rL=0.003,
                              mi=1.0, ni=0.5, me=1 / 1836, ne=0.5)
CONFIGS["Diatomic"] = bk.Diatomic(Kn=0.01, Pr=0.72, K=2.0, gamma=7 / 5)
CONFIGS["VelocitySpace"] = bk.VelocitySpace([-5, -5], [5, 5], [16, 16],
                                            rule="newton", ghosts=[1, 0])


#############################
#           Tests           #
#############################
def test_subclasses_are_complete():
    for (name, cls) in bk.BaseClass.subclasses().items():
        assert cls.__name__ == name
        assert issubclass(cls, bk.BaseClass)


@pytest.mark.parametrize("key", CONFIGS.keys())
def test_parameters_are_attributes(key):
    config = CONFIGS[key]
    assert config.parameters().issubset(config.attributes())
    for attr in config.attributes():
        assert hasattr(config, attr)


@pytest.mark.parametrize("key", CONFIGS.keys())
def test_save_and_load(key, tmp_path):
    config = CONFIGS[key]
    other = test_helper.save_and_load(config, tmp_path)
    assert type(other) is type(config)
    assert other == config


@pytest.mark.parametrize("key", CONFIGS.keys())
def test_write_all_attributes(key, tmp_path):
    config = CONFIGS[key]
    with h5py.File(str(tmp_path / "_all_.hdf5"), mode="w") as file:
        group = file.create_group(key)
        config.save(group, write_all=True)
        assert set(group.keys()) == config.attributes()
        assert group.attrs["class"] == type(config).__name__


def test_load_single_attribute(tmp_path):
    config = CONFIGS["Gas/cavity"]
    with h5py.File(str(tmp_path / "_tmp_.hdf5"), mode="w") as file:
        config.save(file.create_group("gas"))
        assert np.isclose(bk.BaseClass.load_attributes(file["gas"], "Kn"),
                          0.075)


def test_differing_objects_are_not_equal():
    gas = bk.Gas(Kn=0.05)
    assert gas == bk.Gas(Kn=0.05)
    assert not gas.__eq__(bk.Gas(Kn=0.06), print_message=False)
    assert not gas.__eq__(CONFIGS["VelocitySpace"], print_message=False)
    assert gas.__eq__(bk.Gas(Kn=0.05, Pr=0.72), ignore=["Pr"],
                      print_message=False)


def test_gas_parameters_are_material_properties():
    # flow conditions, like a Mach number, belong to boundary states
    assert bk.Gas.parameters() == {"Kn", "Pr", "K", "gamma", "omega",
                                   "alpha_ref", "omega_ref", "mu_ref"}
    with pytest.raises(TypeError):
        bk.Gas(Kn=0.05, Ma=0.5)


def test_reference_viscosity_is_derived_from_knudsen_number():
    gas = bk.Gas(Kn=0.05, alpha_ref=1.0, omega_ref=0.5)
    assert np.isclose(gas.mu_ref, bk.ref_vhs_vis(0.05, 1.0, 0.5))
    assert bk.Gas(Kn=0.05, mu_ref=0.1).mu_ref == 0.1


def test_mixture_properties():
    mixture = CONFIGS["Mixture"]
    assert np.allclose(mixture.masses, [1.0, 0.0005])
    assert np.isclose(mixture.mr, 2000.0)


def test_invalid_gas_fails_integrity_check():
    with pytest.raises(AssertionError):
        bk.Gas(Kn=-1.0)
