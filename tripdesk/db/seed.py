import logging

from tripdesk.repositories.base import CatalogRepository
from tripdesk.schemas.catalog import DestinationCreate, FlightCreate, HotelCreate

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com/{}?ixlib=rb-1.2.1&auto=format&fit=crop&w={}&q=80"

DESTINATIONS = [
    {
        "name": "Agra",
        "description": "Home to the iconic Taj Mahal, Agra Fort, and more historic wonders",
        "image_url": UNSPLASH.format("photo-1548013146-72479768bada", 600),
        "rating": 4.8,
        "review_count": 2345,
        "starting_price": 2499,
    },
    {
        "name": "Jaipur",
        "description": "The Pink City with majestic palaces, vibrant markets, and rich culture",
        "image_url": UNSPLASH.format("photo-1514222134-b57cbb8ce073", 600),
        "rating": 4.9,
        "review_count": 3127,
        "starting_price": 3299,
    },
    {
        "name": "Goa",
        "description": "Paradise beaches, vibrant nightlife, and Portuguese colonial charm",
        "image_url": UNSPLASH.format("photo-1580741569354-08feedd159f9", 600),
        "rating": 4.5,
        "review_count": 5763,
        "starting_price": 3999,
    },
    {
        "name": "Varanasi",
        "description": "Spiritual city on the banks of Ganges with ancient temples and ghats",
        "image_url": UNSPLASH.format("photo-1567157577867-05ccb1388e66", 600),
        "rating": 4.7,
        "review_count": 1896,
        "starting_price": 2199,
    },
    {
        "name": "Udaipur",
        "description": "City of Lakes with stunning palaces, temples, and romantic lakeside views",
        "image_url": UNSPLASH.format("photo-1523544261223-b60f0b3663c6", 600),
        "rating": 4.9,
        "review_count": 3450,
        "starting_price": 4299,
    },
    {
        "name": "Kerala",
        "description": "God's Own Country with serene backwaters, lush greenery and ayurvedic retreats",
        "image_url": UNSPLASH.format("photo-1565538810643-b5bdb714032a", 600),
        "rating": 4.8,
        "review_count": 4125,
        "starting_price": 3599,
    },
    {
        "name": "Darjeeling",
        "description": "Misty mountains, tea plantations, and the famous toy train experience",
        "image_url": UNSPLASH.format("photo-1544714042-5c0a84c2558e", 600),
        "rating": 4.6,
        "review_count": 2132,
        "starting_price": 2899,
    },
    {
        "name": "Amritsar",
        "description": "Home to the Golden Temple, rich Punjabi culture and historic significance",
        "image_url": UNSPLASH.format("photo-1518792528501-352f829886dc", 600),
        "rating": 4.7,
        "review_count": 1758,
        "starting_price": 2499,
    },
]

HOTELS = [
    {
        "name": "Taj Lake Palace",
        "description": "An iconic luxury hotel floating in Lake Pichola with royal heritage and breathtaking views.",
        "location": "Udaipur, Rajasthan",
        "image_url": UNSPLASH.format("photo-1566073771259-6a8506099945", 800),
        "rating": 9.2,
        "price_per_night": 24999,
        "badge": "Popular",
        "tags": ["Luxury", "Lake View", "Heritage"],
        "amenities": ["Swimming Pool", "Spa", "Restaurant", "Wi-Fi", "Room Service", "Airport Shuttle"],
    },
    {
        "name": "The Oberoi Amarvilas",
        "description": "Luxury hotel offering unparalleled views of the Taj Mahal from every room.",
        "location": "Agra, Uttar Pradesh",
        "image_url": UNSPLASH.format("photo-1571896349842-33c89424de2d", 800),
        "rating": 9.5,
        "price_per_night": 32500,
        "badge": "Taj View",
        "tags": ["5-Star", "Spa", "Luxury"],
        "amenities": ["Swimming Pool", "Spa", "Restaurant", "Wi-Fi", "Room Service", "Gym", "Airport Shuttle"],
    },
    {
        "name": "The Leela Palace",
        "description": "Opulent 5-star hotel with world-class amenities in the diplomatic enclave of Delhi.",
        "location": "New Delhi",
        "image_url": UNSPLASH.format("photo-1520250497591-112f2f40a3f4", 800),
        "rating": 9.0,
        "price_per_night": 18999,
        "badge": "20% Off",
        "tags": ["Luxury", "Business", "Dining"],
        "amenities": ["Swimming Pool", "Spa", "Restaurant", "Wi-Fi", "Room Service", "Business Center", "Gym"],
    },
    {
        "name": "Taj Mahal Palace",
        "description": "Historic luxury hotel overlooking the Arabian Sea, with iconic architecture and world-class service.",
        "location": "Mumbai, Maharashtra",
        "image_url": UNSPLASH.format("photo-1445991842772-097fea258e7b", 800),
        "rating": 9.4,
        "price_per_night": 27999,
        "badge": "Iconic",
        "tags": ["Luxury", "Heritage", "Sea View"],
        "amenities": ["Swimming Pool", "Spa", "Multiple Restaurants", "Wi-Fi", "Room Service", "Gym", "Concierge"],
    },
    {
        "name": "Wildflower Hall",
        "description": "Luxury mountain retreat set in 22 acres of virgin woods of pine and cedar with breathtaking views.",
        "location": "Shimla, Himachal Pradesh",
        "image_url": UNSPLASH.format("photo-1544648138-99b4787576c1", 800),
        "rating": 9.1,
        "price_per_night": 21500,
        "badge": "",
        "tags": ["Mountain", "Luxury", "Wellness"],
        "amenities": ["Indoor Pool", "Spa", "Restaurant", "Wi-Fi", "Room Service", "Adventure Activities"],
    },
    {
        "name": "Kumarakom Lake Resort",
        "description": "Traditional Kerala architecture meets luxury on the serene banks of Vembanad Lake.",
        "location": "Kumarakom, Kerala",
        "image_url": UNSPLASH.format("photo-1571003123894-1f0594d2b5d9", 800),
        "rating": 8.9,
        "price_per_night": 15999,
        "badge": "10% Off",
        "tags": ["Heritage", "Beachfront", "Wellness"],
        "amenities": ["Infinity Pool", "Spa", "Restaurant", "Wi-Fi", "Room Service", "Boat Tours"],
    },
]

FLIGHTS = [
    {
        "airline": "Air India",
        "airline_logo": "https://logo.clearbit.com/airindia.in",
        "status": "On Time",
        "departure_code": "DEL",
        "departure_city": "New Delhi",
        "arrival_code": "BOM",
        "arrival_city": "Mumbai",
        "duration": "1h 55m",
        "stops": 0,
        "price": 4249,
        "departure_time": "09:15",
        "arrival_time": "11:10",
        "date": "2023-07-15",
    },
    {
        "airline": "IndiGo",
        "airline_logo": "https://logo.clearbit.com/goindigo.in",
        "status": "On Time",
        "departure_code": "BLR",
        "departure_city": "Bengaluru",
        "arrival_code": "CCU",
        "arrival_city": "Kolkata",
        "duration": "2h 40m",
        "stops": 0,
        "price": 5649,
        "departure_time": "10:30",
        "arrival_time": "13:10",
        "date": "2023-07-15",
    },
    {
        "airline": "SpiceJet",
        "airline_logo": "https://logo.clearbit.com/spicejet.com",
        "status": "10m Delay",
        "departure_code": "HYD",
        "departure_city": "Hyderabad",
        "arrival_code": "MAA",
        "arrival_city": "Chennai",
        "duration": "1h 25m",
        "stops": 0,
        "price": 3799,
        "departure_time": "14:15",
        "arrival_time": "15:40",
        "date": "2023-07-15",
    },
    {
        "airline": "Vistara",
        "airline_logo": "https://logo.clearbit.com/airvistara.com",
        "status": "On Time",
        "departure_code": "DEL",
        "departure_city": "New Delhi",
        "arrival_code": "BLR",
        "arrival_city": "Bengaluru",
        "duration": "2h 30m",
        "stops": 0,
        "price": 6199,
        "departure_time": "08:00",
        "arrival_time": "10:30",
        "date": "2023-07-15",
    },
    {
        "airline": "Air India Express",
        "airline_logo": "https://logo.clearbit.com/airindiaexpress.in",
        "status": "On Time",
        "departure_code": "COK",
        "departure_city": "Kochi",
        "arrival_code": "BOM",
        "arrival_city": "Mumbai",
        "duration": "1h 45m",
        "stops": 0,
        "price": 4499,
        "departure_time": "16:45",
        "arrival_time": "18:30",
        "date": "2023-07-15",
    },
    {
        "airline": "GoAir",
        "airline_logo": "https://logo.clearbit.com/goair.in",
        "status": "20m Delay",
        "departure_code": "BOM",
        "departure_city": "Mumbai",
        "arrival_code": "JAI",
        "arrival_city": "Jaipur",
        "duration": "1h 40m",
        "stops": 0,
        "price": 3899,
        "departure_time": "12:15",
        "arrival_time": "13:55",
        "date": "2023-07-15",
    },
]


def seed_catalog(repository: CatalogRepository) -> bool:
    """Load the demo catalog into an empty store. Returns False if anything was already there."""
    if not repository.is_catalog_empty():
        logger.info("Catalog already populated, skipping seed")
        return False

    for data in DESTINATIONS:
        repository.create_destination(DestinationCreate(**data))
    for data in HOTELS:
        repository.create_hotel(HotelCreate(**data))
    for data in FLIGHTS:
        repository.create_flight(FlightCreate(**data))

    logger.info(f"Seeded {len(DESTINATIONS)} destinations, {len(HOTELS)} hotels, {len(FLIGHTS)} flights")
    return True
