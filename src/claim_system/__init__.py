"""Contract Monthly Claim System package.

Feature modules (claims, auth) each carry a model, a repository or provider
seam, a service holding the business rules and a thin Flask controller.
"""
