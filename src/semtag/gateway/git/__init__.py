"""Git gateway.

The driver talks to git only through the sub-gateways in this package:
- repo_ops: local repository setup and reading another checkout's HEAD
- remote_ops: fetching and querying the remote
- tag_ops: listing, creating, deleting and pushing tags
"""
