"""ah - list, start and stop EC2 instances by their Name tag."""

__version__ = "0.1.0"
