import numpy as np
import h5py
import bgkpy as bk


class BaseClass:
    """Common base of all setup-time objects.

    Subclasses declare their initialization parameters
    in :meth:`parameters` and all further attributes in :meth:`attributes`.
    The parameters are sufficient to rebuild an instance,
    which allows storing configurations in HDF5 groups.
    """
    def __eq__(self, other, ignore=None, print_message=True):
        if ignore is None:
            ignore = []
        # other may be a child class of self
        if not isinstance(other, type(self)):
            if print_message:
                print("Objects are of different type:",
                      "\n\ttype(self) = ", type(self),
                      "\n\ttype(other) = ", type(other))
            return False
        if set(self.__dict__.keys()) != set(other.__dict__.keys()):
            if print_message:
                print("Objects have different attributes:",
                      "\n\tself.keys = ", set(self.__dict__.keys()),
                      "\n\tother.keys = ", set(other.__dict__.keys()))
            return False
        for (key, value) in self.__dict__.items():
            if key in ignore:
                continue
            other_value = other.__dict__[key]
            if type(value) != type(other_value):
                if print_message:
                    print("An attribute is of different type:",
                          "\n\tAttribute = ", key,
                          "\n\ttype(self) = ", type(value),
                          "\n\ttype(other) = ", type(other_value))
                return False
            if isinstance(value, np.ndarray):
                if value.shape != other_value.shape:
                    if print_message:
                        print("An attribute has differing shapes:",
                              "\n\tAttribute = ", key,
                              "\n\tself.attr.shape = ", value.shape,
                              "\n\tother.attr.shape = ", other_value.shape)
                    return False
                if value.dtype == float:
                    is_equal = np.allclose(value, other_value)
                else:
                    is_equal = np.array_equal(value, other_value)
            elif isinstance(value, float):
                is_equal = np.isclose(value, other_value)
            else:
                is_equal = value == other_value
            if not is_equal:
                if print_message:
                    print("An attribute has differing values:",
                          "\n\tAttribute = ", key)
                return False
        return True

    #####################################
    #           Serialization           #
    #####################################
    @staticmethod
    def subclasses(subclass=None):
        """Returns the Class object of the given subclass.
        If no subclass is given, then returns a dictionary of all subclasses.

        Parameters
        ----------
        subclass : :obj:`str`, optional

        Returns
        -------
        self : :obj:`type`
        """
        subclasses = {
            "VelocitySpace": bk.VelocitySpace,
            "Gas": bk.Gas,
            "Mixture": bk.Mixture,
            "Plasma": bk.Plasma,
            "Diatomic": bk.Diatomic}
        if subclass is None:
            return subclasses
        else:
            return subclasses[subclass]

    @staticmethod
    def parameters():
        """The set of initialization parameters, including optionals."""
        raise NotImplementedError

    @staticmethod
    def attributes():
        """The set of all class attributes and properties."""
        raise NotImplementedError

    @staticmethod
    def load_attributes(hdf5_group, attributes):
        """Read a set of parameters from a given HDF5 group.
        Returns a dictionary of the read values
        or the value, if only a single attribute was given as a string.

        Parameters
        ----------
        hdf5_group : :obj:`h5py.Group <h5py:Group>`
        attributes : :obj:`str`, :obj:`list`, or  :obj:`set`
        """
        if type(attributes) is str:
            result = BaseClass.load_attributes(hdf5_group, [attributes])
            return result[attributes]
        assert isinstance(hdf5_group, h5py.Group)
        assert type(attributes) in [list, set]
        result = dict()
        for p in attributes:
            assert p in hdf5_group.keys(), (
                "The parameter {} is missing in the HDF5 group".format(p))
            node = hdf5_group[p]
            if isinstance(node, h5py.Dataset):
                val = node[()]
                # h5py returns byte strings, unless asked for str
                if type(val) == bytes:
                    result[p] = node.asstr()[()]
                else:
                    result[p] = val
            elif isinstance(node, h5py.Group):
                result[p] = BaseClass.load(node)
            else:
                raise ValueError
        return result

    @staticmethod
    def load(hdf5_group):
        """Read parameters from the given HDF5 group,
        initialize and return an instance based on these parameters.

        Parameters
        ----------
        hdf5_group : :obj:`h5py.Group <h5py:Group>`

        Returns
        -------
        self : :class:`BaseClass`
        """
        cls = hdf5_group.attrs["class"]
        if cls not in BaseClass.subclasses().keys():
            raise ValueError("unknown class {} in HDF5 group".format(cls))
        subclass = BaseClass.subclasses(cls)
        parameters = BaseClass.load_attributes(hdf5_group,
                                               subclass.parameters())
        return subclass(**parameters)

    @staticmethod
    def save_attribute(hdf5_group, key, value):
        if isinstance(value, BaseClass):
            hdf5_group.create_group(key)
            value.save(hdf5_group[key])
        else:
            hdf5_group[key] = value

    def save(self, hdf5_group, write_all=False):
        """Write the parameters of the Class into the HDF5 group.

        Parameters
        ----------
        hdf5_group : :obj:`h5py.Group <h5py:Group>`
        write_all : :obj:`bool`
            If True, write all attributes and properties to the file,
            even the unnecessary ones. Useful for testing,
        """
        assert isinstance(hdf5_group, h5py.Group)
        self.check_integrity()
        for key in list(hdf5_group.keys()):
            del hdf5_group[key]
        # the class name allows automatic loading
        hdf5_group.attrs["class"] = self.__class__.__name__
        if write_all:
            attributes = self.attributes()
        else:
            attributes = self.parameters()
        for attr in attributes:
            self.save_attribute(hdf5_group, attr, self.__getattribute__(attr))

        # the saved parameters must rebuild an equal instance
        other = self.load(hdf5_group)
        assert self == other
        return

    def check_integrity(self):
        """Sanity Check."""
        assert isinstance(self.parameters(), set)
        assert isinstance(self.attributes(), set)
        assert self.parameters().issubset(self.attributes())
