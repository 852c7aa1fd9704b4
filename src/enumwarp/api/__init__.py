"""HTTP entry point for GitHub webhooks"""
from .app import create_app
