"""discord.py integration.

Converts finished embed documents into ``discord.Embed`` objects for callers
that send messages through discord.py. Nothing here talks to Discord.
"""
