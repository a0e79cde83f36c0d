"""Billing collaborator and its session-thread ingress."""

from randomcaser.billing.bridge import BillingBridge
from randomcaser.billing.sandbox import SandboxBilling

__all__ = ["BillingBridge", "SandboxBilling"]
