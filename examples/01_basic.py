"""
Basic usage - Add documents and search
"""
from meilipy import MeiliClient


def main():
    with MeiliClient("http://localhost:7700", api_key="masterKey") as client:
        movies = client.index("movies")
        
        # Writes are asynchronous on the server
        update = movies.add_documents([
            {"id": "1", "title": "Carol", "genre": "Drama"},
            {"id": "2", "title": "Wonder Woman", "genre": "Action"},
        ])
        print(f"Enqueued update {update.update_id}")
        
        status = movies.wait_for_update(update.update_id)
        print(f"Update {status.update_id}: {status.status}")
        
        # Search
        response = movies.search("carol")
        print(f"{response.nb_hits} hits in {response.processing_time_ms} ms")
        for hit in response:
            print(f"  {hit['id']}: {hit['title']}")


if __name__ == "__main__":
    main()
