import h5py
import numpy as np

import bgkpy as bk


def save_and_load(instance, directory, key="instance"):
    """Store a :class:`~bgkpy.BaseClass` in a HDF5 file and read it back."""
    file_address = str(directory / "_tmp_.hdf5")
    with h5py.File(file_address, mode="w") as file:
        file.create_group(key)
        instance.save(file[key])
    with h5py.File(file_address, mode="r") as file:
        return bk.BaseClass.load(file[key])


def assert_moments_close(w, expected, rtol=1e-6, atol=1e-10):
    w = np.asarray(w)
    expected = np.asarray(expected)
    assert w.shape == expected.shape, (w.shape, expected.shape)
    assert np.allclose(w, expected, rtol=rtol, atol=atol), (w, expected)


def make_cell(model, vs, prim, measure=1.0, K=0.0, gamma=5 / 3, **fields):
    """Return a cell in equilibrium with the given primitive state."""
    prim = np.array(prim, dtype=float)
    if prim.ndim == 2:
        w = bk.mixture_prim_conserve(prim, gamma)
    else:
        w = bk.prim_conserve(prim, gamma)
    pdf = None
    if model is not None:
        pdf = bk.equilibrium_distribution(model, vs, prim, K)
    return bk.ControlVolume(w, prim, measure, pdf, **fields)


def zero_faces(cell, em=False):
    """Return two interfaces without flux for the given cell."""
    model = None if cell.pdf is None else cell.pdf.model
    shape = None if cell.pdf is None else cell.pdf.shape
    return [bk.Interface.zeros(cell.w.shape, model, shape, em=em)
            for _ in range(2)]
