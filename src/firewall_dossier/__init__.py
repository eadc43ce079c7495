"""firewall-dossier: statistics, findings and redacted exports for firewall configurations."""

__version__ = "0.4.0"
