"""Text transform, entitlement and session orchestration."""
