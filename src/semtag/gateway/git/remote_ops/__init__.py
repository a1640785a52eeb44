"""Git remote operations sub-gateway.

Import from submodules:
- abc: GitRemoteOps
- real: RealGitRemoteOps
- fake: FakeGitRemoteOps
"""
