"""
Exceptions raised by kubectl-ilogs.

Exception Hierarchy:
- IlogsError: Base exception, caught by the command and turned into exit code 1
  - UsageError: Bad command-line input (empty filter, negative tail)
  - ConfigError: Kubernetes configuration could not be loaded
  - TransportError: The pod listing call failed
  - EmptyScopeError: No pods at all in the selected scope
  - NoMatchError: The filter term matched no pod
  - PromptError: The interactive selection failed
"""


class IlogsError(Exception):
    """Base exception for kubectl-ilogs errors."""
    pass


class UsageError(IlogsError):
    """Raised when command-line input is invalid."""
    pass


class ConfigError(IlogsError):
    """Raised when the cluster configuration cannot be resolved."""
    pass


class TransportError(IlogsError):
    """Raised when the Kubernetes API call fails."""
    pass


class EmptyScopeError(IlogsError):
    """Raised when no pods exist in the selected scope."""
    pass


class NoMatchError(IlogsError):
    """Raised when no pod name contains the filter term."""

    def __init__(self, filter_term: str):
        super().__init__(f"no pods found with filter: {filter_term}")
        self.filter_term = filter_term


class PromptError(IlogsError):
    """Raised when the interactive prompt is interrupted or its input closes."""
    pass
