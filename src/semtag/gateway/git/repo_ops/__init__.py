"""Git repository setup sub-gateway.

Import from submodules:
- abc: GitRepoOps
- real: RealGitRepoOps
- fake: FakeGitRepoOps
"""
