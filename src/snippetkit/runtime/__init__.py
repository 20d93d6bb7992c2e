"""Runtime layer: helpers that interact with time and the asyncio event loop."""
