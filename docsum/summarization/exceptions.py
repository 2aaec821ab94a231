class SummarizationCallError(Exception):
    """Raised when a single call to the generative-text provider fails."""


class SummarizationNetworkError(SummarizationCallError):
    """Raised when the provider call fails due to network/infrastructure issues."""


class SummarizationQuotaError(SummarizationCallError):
    """Raised when the provider rejects the call for quota or rate-limit reasons."""


class SummarizationResponseError(SummarizationCallError):
    """Raised when the provider answers without usable text."""
