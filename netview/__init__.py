"""netview — local interfaces, outbound IP and routing table at a glance."""

__app_name__ = "netview"
__version__ = "0.3.0"
