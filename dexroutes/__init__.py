"""In-memory swap router, smart route selection and reward distribution for an AMM exchange."""

__version__ = "0.1.0"

__all__ = ["errors", "messages", "router", "rewarder", "smartrouter"]