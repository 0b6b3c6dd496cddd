"""Basic usage examples for the IndyCar client."""

from datetime import UTC, datetime

from indycar import IndyCarClient
from indycar.projections import build_news_digest, build_upcoming_window, search_races


def main() -> None:
    with IndyCarClient() as espn:
        board = espn.scoreboard()
        feed = espn.news()

    now = datetime.now(UTC)

    # Races in the next 60 days
    print("=== Next 60 days ===")
    window = build_upcoming_window(board, days=60, limit=10, now=now)
    for race in window.races:
        print(f"  {race.name} - in {race.days_until} days ({race.date})")
    if not window.races:
        print("  No races scheduled.")

    # Look up the 500
    print("\n=== Indianapolis 500 ===")
    for race in search_races(board, "indianapolis 500", now).races:
        print(f"  {race.name} at {race.venue or 'TBA'} on {race.broadcast or 'TBA'}")

    print("\n=== Headlines ===")
    for article in build_news_digest(feed, limit=5, now=now).articles:
        print(f"  {article.headline}")
        print(f"    {article.url}")


if __name__ == "__main__":
    main()
