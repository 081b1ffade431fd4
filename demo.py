#!/usr/bin/env python3
"""
Bionova Research Explorer - Demo Script
=======================================
Quick demonstration of system capabilities against a running server
"""

import sys
import time

from bionova.analytics import aggregate
from bionova.client import ResearchClient
from bionova.errors import BackendError, ConnectivityError
from bionova.themes import extract_themes


def test_server(client):
    """Check if server is running"""
    try:
        health = client.health()
        return health.get("status") == "ok", health
    except (ConnectivityError, BackendError):
        return False, {}


def demo_query(client, query, description):
    """Demonstrate a query"""
    print(f"\n🔍 {description}")
    print(f"Query: '{query}'")
    print("─" * 60)

    try:
        result = client.search(query)
    except (ConnectivityError, BackendError) as e:
        print(f"❌ Failed: {e}")
        return

    if result.is_empty:
        print(f"ℹ️  {result.status_message}")
        return

    stats = aggregate(result.detailed_report).stats
    themes = extract_themes(result.detailed_report, limit=5)
    print(f"✅ Overview: {result.summary.overview[:200]}...")
    print(f"📄 Reports: {stats.total_reports} ({stats.year_range})")
    print(f"🧬 Top organism: {stats.top_organism}   🚀 Top mission: {stats.top_mission}")
    print(f"🔗 Graph: {len(result.graph.nodes)} nodes, {len(result.graph.links)} links")
    print(f"💡 Themes: {', '.join(term.text for term in themes)}")


def main():
    print("""
🚀 Bionova Research Explorer - Live Demo
========================================
Testing your system with real queries...
""")

    client = ResearchClient()

    # Check server
    running, health = test_server(client)
    if not running:
        print("❌ Server not running! Please start with: uvicorn bionova.main:app")
        sys.exit(1)

    print(f"✅ Server is running! Provider: {health.get('provider')} ({health.get('model')})")

    # Demo queries
    demo_queries = [
        ("What are the effects of microgravity on plant growth?", "Microgravity Research"),
        ("How does space radiation affect human cells?", "Radiation Biology"),
        ("Rodent Research missions on bone loss", "Bone & Muscle"),
        ("What papers discuss space agriculture?", "Space Agriculture"),
    ]

    for query, desc in demo_queries:
        demo_query(client, query, desc)
        time.sleep(2)  # Rate limiting

    print(f"""
🎉 Demo Complete!
================
💡 Try more queries at: {client.base_url}/search
""")


if __name__ == "__main__":
    main()
