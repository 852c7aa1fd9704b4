"""GitHub push-event handling and source retrieval"""
from .source import GitHubClient, fetch_content, get_sources, is_enum_source, list_tree_paths
from .webhook import handle_github_event, verify_signature
