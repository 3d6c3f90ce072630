"""Job Hunter API - accounts, companies and applicant profiles."""

__version__ = "1.0.0"
