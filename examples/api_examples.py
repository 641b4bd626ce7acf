"""Example API usage demonstrating all endpoints.

Run the server first:
    python main.py

Then run this script:
    python examples/api_examples.py
"""

import asyncio

import httpx


async def main():
    """Run all API examples."""
    base_url = "http://localhost:8000/api/v1"

    async with httpx.AsyncClient() as client:
        print("=" * 80)
        print("Insurance Enumerations API Examples")
        print("=" * 80)

        # Example 1: Health Check
        print("\n1. Health Check")
        print("-" * 80)
        response = await client.get(f"{base_url}/health")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")

        # Example 2: List Catalogs
        print("\n2. List Enumerations")
        print("-" * 80)
        response = await client.get(f"{base_url}/enumerations")
        for catalog in response.json()["catalogs"]:
            print(f"  - {catalog['name']}: {catalog['description']} ({catalog['item_count']} items)")

        # Example 3: Read One Catalog
        print("\n3. Vehicle Mileage Bands")
        print("-" * 80)
        response = await client.get(f"{base_url}/enumerations/vehiclemileage")
        for item in response.json()["items"]:
            meta = item["Meta"]
            print(f"  {item['Value']:<20} {meta.get('Min', ''):>7} - {meta.get('Max', '')}")

        # Example 4: Alias Lookup
        print("\n4. Look Up an Incident by Alias")
        print("-" * 80)
        response = await client.get(f"{base_url}/enumerations/incident/items/atfault")
        item = response.json()
        print(f"Canonical id: {item['Value']}")
        print(f"Description: {item['Description']}")
        print(f"Classification: {item['Meta'].get('Classification')}")

        # Example 5: Unknown Item
        print("\n5. Look Up an Unknown Gender")
        print("-" * 80)
        response = await client.get(f"{base_url}/enumerations/gender/items/X")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")

        # Example 6: Validate Partner Values
        print("\n6. Validate Partner Marital Status Values")
        print("-" * 80)
        response = await client.post(
            f"{base_url}/enumerations/maritalstatus/validate",
            json={"values": ["S", "m", "Divorced", "complicated", ""]},
        )
        result = response.json()
        print(f"Invalid values: {result['invalid_count']}")
        for capture in result["results"]:
            status = "✓" if capture["valid"] else "✗"
            print(
                f"  {status} {capture['value']!r:<15} -> {capture['canonical_id']} "
                f"{capture['errors'] or ''}"
            )

        print("\n" + "=" * 80)
        print("Examples completed!")
        print("=" * 80)


if __name__ == "__main__":
    asyncio.run(main())
