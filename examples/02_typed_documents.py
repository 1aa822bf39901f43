"""
Typed documents - Map documents to a dataclass
"""
from dataclasses import dataclass
from typing import Optional

from meilipy import MeiliClient, DocumentCodec, SearchRequest, MeiliSearchApiError


@dataclass
class Movie:
    id: str
    title: str
    genre: Optional[str] = None


def main():
    with MeiliClient("http://localhost:7700") as client:
        movies = client.index("movies", DocumentCodec.for_dataclass(Movie))
        
        update = movies.update_documents([Movie(id="3", title="Amélie", genre="Comedy")])
        movies.wait_for_update(update.update_id)
        
        movie = movies.get_document("3")
        print(f"Fetched: {movie}")
        
        response = movies.search(SearchRequest(q="amelie", limit=5, attributes_to_highlight=["title"]))
        for hit in response.hits:
            print(f"  {hit.title} ({hit.genre})")
        
        try:
            movies.get_document("does-not-exist")
        except MeiliSearchApiError as e:
            print(f"Not found: {e.status_code} {e.error_code}")


if __name__ == "__main__":
    main()
