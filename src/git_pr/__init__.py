"""git-pr: open GitHub pull requests from local git branches.

This package provides a Click-based CLI that resolves git remotes to GitHub
repositories and drives the pull request REST API. See `git-pr --help`.
"""
