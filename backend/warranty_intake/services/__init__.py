"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- claims: Claim number sequencer, submission validation and intake coordinator
- external: Third-party API integrations (HubSpot, Brevo)
"""
