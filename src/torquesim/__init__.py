"""Interactive rotational dynamics demo: drag a disk, watch torque turn into rotation."""
__version__ = "0.1.0"
