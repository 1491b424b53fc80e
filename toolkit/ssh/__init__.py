"""Recorded shell command conversations and a service that replays them."""