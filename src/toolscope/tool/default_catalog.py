"""The tools offered by the travel chat deployment.

Each integration (MCP server) contributes a handful of tools. Categories
follow the keyword rules in toolscope.selection.default_rules.
"""

from __future__ import annotations

from typing import Any, TypeAlias

from toolscope.tool.Catalog import Catalog
from toolscope.tool.ToolDescriptor import ToolDescriptor

_Props: TypeAlias = dict[str, dict[str, Any]]


def _string(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def _number(description: str) -> dict[str, Any]:
    return {"type": "number", "description": description}


def _object(properties: _Props, required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "properties": properties,
    }
    if required:
        schema["required"] = required
    return schema


def _tool(
    tool_id: str,
    display_name: str,
    description: str,
    category: str,
    integration: str,
    schema: dict[str, Any],
    enabled: bool = True,
) -> ToolDescriptor:
    return ToolDescriptor(
        id=tool_id,
        display_name=display_name,
        description=description,
        input_schema=schema,  # type: ignore[arg-type]
        category=category,
        integration=integration,
        enabled=enabled,
    )


def default_descriptors() -> list[ToolDescriptor]:
    """Build fresh descriptors for the deployment's tool set."""
    stay_dates: _Props = {
        "checkin": _string("Check-in date in YYYY-MM-DD format"),
        "checkout": _string("Check-out date in YYYY-MM-DD format"),
        "adults": _number("Number of adults (default: 1)"),
    }
    return [
        # Ferryhopper
        _tool(
            "ferryhopper_get_ports",
            "Ferry ports",
            "Get a list of global ports and their details from Ferryhopper",
            "transport",
            "ferryhopper",
            _object({"query": _string("Search query for ports (optional)")}),
        ),
        _tool(
            "ferryhopper_search_trips",
            "Ferry trips",
            "Get available ferry trips between two ports on a specific date",
            "transport",
            "ferryhopper",
            _object(
                {
                    "departurePort": _string("Departure port name or code"),
                    "arrivalPort": _string("Arrival port name or code"),
                    "date": _string("Travel date in YYYY-MM-DD format"),
                },
                ["departurePort", "arrivalPort", "date"],
            ),
        ),
        _tool(
            "ferryhopper_redirect_to_booking",
            "Ferry booking link",
            "Get a redirection URL to Ferryhopper booking page",
            "transport",
            "ferryhopper",
            _object(
                {
                    "departurePort": _string("Departure port name"),
                    "arrivalPort": _string("Arrival port name"),
                    "ownerCompany": _string("Ferry company name"),
                    "departureDateTime": _string("Departure date and time"),
                    "arrivalDateTime": _string("Arrival date and time"),
                    "vesselID": _string("Vessel identifier"),
                },
                [
                    "departurePort",
                    "arrivalPort",
                    "ownerCompany",
                    "departureDateTime",
                    "arrivalDateTime",
                    "vesselID",
                ],
            ),
        ),
        # Airbnb
        _tool(
            "airbnb_search",
            "Airbnb search",
            "Search for Airbnb listings with comprehensive filtering options",
            "accommodation",
            "airbnb",
            _object(
                {
                    "location": _string('Location to search (e.g., "San Francisco, CA")'),
                    **stay_dates,
                    "minPrice": _number("Minimum price per night"),
                    "maxPrice": _number("Maximum price per night"),
                },
                ["location"],
            ),
        ),
        _tool(
            "airbnb_listing_details",
            "Airbnb listing",
            "Get detailed information about a specific Airbnb listing",
            "accommodation",
            "airbnb",
            _object({"id": _string("Airbnb listing ID"), **stay_dates}, ["id"]),
        ),
        # Expedia
        _tool(
            "expedia_hotel_search",
            "Expedia hotels",
            "Search for hotels using Expedia MCP server",
            "accommodation",
            "expedia",
            _object(
                {
                    "destination": _string("The destination city or location"),
                    "check_in": _string("Check-in date in YYYY-MM-DD format"),
                    "check_out": _string("Check-out date in YYYY-MM-DD format"),
                    "amenities": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Desired amenities: POOL, SPA, WIFI, etc.",
                    },
                },
                ["destination", "check_in", "check_out"],
            ),
        ),
        _tool(
            "expedia_activity_search",
            "Expedia activities",
            "Search for activities using Expedia MCP server",
            "travel",
            "expedia",
            _object(
                {
                    "destination": _string("The destination city or location"),
                    "start_date": _string("Start date in YYYY-MM-DD format"),
                    "end_date": _string("End date in YYYY-MM-DD format"),
                    "price_range": {
                        "type": "object",
                        "title": "PriceRange",
                        "properties": {"min": _number("Minimum price"), "max": _number("Maximum price")},
                    },
                },
                ["destination"],
            ),
        ),
        _tool(
            "expedia_car_rental",
            "Expedia car rental",
            "Search for car rentals using Expedia MCP server",
            "transport",
            "expedia",
            _object(
                {
                    "pickup_location": _string("Pickup location"),
                    "pickup_date": _string("Pickup date in YYYY-MM-DD format"),
                    "dropoff_date": _string("Dropoff date in YYYY-MM-DD format"),
                },
                ["pickup_location", "pickup_date", "dropoff_date"],
            ),
        ),
        # Kiwi.com
        _tool(
            "kiwi_search_flights",
            "Kiwi flight search",
            "Search for flights with comprehensive options including date flexibility and cabin class",
            "travel",
            "kiwi",
            _object(
                {
                    "flyFrom": _string("Departure airport or city"),
                    "flyTo": _string("Arrival airport or city"),
                    "departureDate": _string("Departure date in YYYY-MM-DD format"),
                    "cabinClass": {
                        "type": "string",
                        "enum": ["M", "W", "C", "F"],
                        "default": "M",
                        "description": "Cabin class",
                    },
                },
                ["flyFrom", "flyTo", "departureDate"],
            ),
        ),
        _tool(
            "kiwi_search_airports",
            "Kiwi airport search",
            "Search for airports by name, city, or IATA code",
            "travel",
            "kiwi",
            _object({"query": _string("Airport name, city or IATA code")}, ["query"]),
        ),
        _tool(
            "kiwi_get_cheapest_destinations",
            "Kiwi cheapest destinations",
            "Find the cheapest destinations from a specific origin",
            "travel",
            "kiwi",
            _object({"flyFrom": _string("Origin airport or city")}, ["flyFrom"]),
        ),
        # Mapbox
        _tool(
            "mapbox_directions",
            "Mapbox directions",
            "Get routing directions between multiple waypoints",
            "mapping",
            "mapbox",
            _object(
                {
                    "coordinates": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "longitude": _number("Longitude"),
                                "latitude": _number("Latitude"),
                            },
                            "required": ["longitude", "latitude"],
                        },
                        "description": "Waypoints in travel order",
                    },
                    "routing_profile": {
                        "type": "string",
                        "enum": ["driving", "walking", "cycling"],
                        "default": "driving",
                    },
                },
                ["coordinates"],
            ),
        ),
        _tool(
            "mapbox_category_search",
            "Mapbox category search",
            "Search for points of interest by category using Mapbox Search Box API",
            "mapping",
            "mapbox",
            _object({"category": _string("Category such as restaurant or gas_station")}, ["category"]),
        ),
        _tool(
            "mapbox_static_image",
            "Mapbox static map",
            "Generate static map images using Mapbox static image API",
            "mapping",
            "mapbox",
            _object(
                {
                    "longitude": _number("Map center longitude"),
                    "latitude": _number("Map center latitude"),
                    "zoom": _number("Zoom level"),
                },
                ["longitude", "latitude"],
            ),
        ),
        # Turkish Airlines, off until the integration is configured
        _tool(
            "turkish_airlines_search_flights",
            "Turkish Airlines flights",
            "Search Turkish Airlines flights by origin, destination, and dates",
            "travel",
            "turkish-airlines",
            _object(
                {
                    "origin": _string("Origin airport code"),
                    "destination": _string("Destination airport code"),
                    "date": _string("Departure date in YYYY-MM-DD format"),
                },
                ["origin", "destination", "date"],
            ),
            enabled=False,
        ),
    ]


def default_catalog() -> Catalog:
    """Build a new Catalog holding the deployment's tools."""
    return Catalog(default_descriptors())
