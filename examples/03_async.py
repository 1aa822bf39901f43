"""
Async usage - Same operations with aiohttp
"""
import asyncio
import logging

from meilipy import AsyncMeiliClient, APIConfig, TimeoutConfig


async def main():
    logging.basicConfig(level=logging.DEBUG)
    
    config = APIConfig(
        host="http://localhost:7700",
        timeout=TimeoutConfig(total=10.0),
    )
    
    async with AsyncMeiliClient(config=config) as client:
        movies = client.index("movies")
        
        documents = await movies.get_documents(limit=10)
        print(f"{len(documents)} documents")
        
        for update in await movies.get_updates():
            print(f"  update {update.update_id}: {update.status}")


if __name__ == "__main__":
    asyncio.run(main())
