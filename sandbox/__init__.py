"""
Sandbox Module

Probes that observe whether the current process is confined to a sandbox.

This module provides:
- A write/read/delete round-trip probe for the sandbox home
- Read probes for sensitive files under the real user home
- Directory listing probes for the real home and system directories
- A cancellable outbound network probe

WARNING: These probes only OBSERVE confinement enforced elsewhere (container,
chroot, OS policy). Nothing in this module restricts the process itself.
"""

__version__ = "0.1.0"
