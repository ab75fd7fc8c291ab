"""pkgdeps — abstract build dependencies to distro package names."""

__version__ = "0.1.0"
