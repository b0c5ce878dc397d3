"""
Application layer - Use cases and orchestration for SealedVote.

This layer contains:
- Ports (Protocol interfaces to external collaborators)
- Application services (ledger, accumulator, coordinator, publisher)

Depends on the domain layer and configuration; infrastructure implements
the ports.
"""
