"""Git tag operations sub-gateway.

This module provides a separate gateway for tag operations,
including listing tags, creating tags, and pushing or deleting remote tags.

Import from submodules:
- abc: GitTagOps
- real: RealGitTagOps
- fake: FakeGitTagOps
- dry_run: DryRunGitTagOps
- types: TagListing, NoTagsYet, TagPushed, TagPushRejected
"""
