"""Test fake implementations for dependency injection testing."""

from tests.fakes.fake_ec2_client import FakeEC2Client, make_raw_instance

__all__ = ["FakeEC2Client", "make_raw_instance"]
