"""Adapters for the network and the dotnet CLI."""
