"""Policy Awareness Survey API."""
