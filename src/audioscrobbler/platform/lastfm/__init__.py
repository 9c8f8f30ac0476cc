"""Last.fm infrastructure package.

Provides the HTTP transport used by the generated bindings and the
User-Agent etiquette shared by outbound requests.
"""
