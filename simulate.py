"""
Simple simulation script: a random human against every computer level.
"""

import random
import sys

import requests


def play_game(base_url, game_id):
    """Play random human moves until the game ends. Returns the final status."""
    response = requests.get(f"{base_url}/games/{game_id}")
    game = response.json()

    while game["status"] == "playing":
        empty = [i for i, cell in enumerate(game["board"]) if cell is None]
        index = random.choice(empty)

        response = requests.post(
            f"{base_url}/games/{game_id}/move",
            json={"index": index}
        )
        if response.status_code != 200:
            print(f"Move failed: {response.text}")
            return None
        game = response.json()

    return game["status"]


def main():
    BASE_URL = "http://localhost:8000/api/v1"
    GAMES_PER_SETUP = 10
    SETUPS = [
        ("classic", "soft"),
        ("classic", "smart"),
        ("classic", "unbeatable"),
        ("relax", "soft"),
        ("relax", "smart"),
        ("relax", "unbeatable"),
        ("daily", "soft"),
    ]

    print("=== Tic Tac Toe Simulation ===\n")

    results = {}
    for mode, difficulty in SETUPS:
        response = requests.post(
            f"{BASE_URL}/games",
            json={"mode": mode, "difficulty": difficulty}
        )
        if response.status_code != 200:
            print(f"Failed to create game: {response.text}")
            sys.exit(1)
        game_id = response.json()["id"]

        stats = {"win": 0, "lose": 0, "draw": 0}
        for _ in range(GAMES_PER_SETUP):
            status = play_game(BASE_URL, game_id)
            if status in stats:
                stats[status] += 1
            requests.post(f"{BASE_URL}/games/{game_id}/reset", json={})

        label = mode if mode == "daily" else f"{mode}/{difficulty}"
        results[label] = stats
        print(f"  {label}: {stats['win']} human wins, {stats['lose']} computer wins, {stats['draw']} draws")

    # Display results
    print("\n=== Results ===\n")
    for label, stats in sorted(results.items(), key=lambda x: x[1]["win"]):
        total = sum(stats.values())
        human_rate = (stats["win"] / total * 100) if total > 0 else 0
        print(f"  {label:<20} human win rate {human_rate:.1f}%")

    unbeatable = results.get("classic/unbeatable", {})
    if unbeatable.get("win"):
        print("\n X Unbeatable level lost a game!")
        sys.exit(1)

    print("\n Simulation complete!")


if __name__ == "__main__":
    main()
