"""Cloudflare DNS-01 challenge solver."""
