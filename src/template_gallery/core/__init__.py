"""Template discovery, package reconciliation and the packages service."""
