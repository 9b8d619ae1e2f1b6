"""Gateways to the processes and services git-pr talks to."""
