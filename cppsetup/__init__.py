"""cppsetup - C++ Project Setup Tool."""

__version__ = "1.0.0"
