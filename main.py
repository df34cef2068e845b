import logging

from fastapi import FastAPI, HTTPException, Depends
from typing import List

from api.schemas import (
    # Rooms
    CreateRoomRequest, RoomResponse, RoomWithBookingsResponse, RoomBookingResponse,
    # Bookings
    CreateBookingRequest, BookingResponse,
    # Customers
    CustomerWithBookingsResponse, CustomerBookingResponse, BookingDetailResponse
)
from api.dependencies import get_today

from application.services import RoomService, CustomerService, BookingService
from application.views import BookingQueryService
from infrastructure.repositories.in_memory_repositories import (
    InMemoryRoomRepository, InMemoryCustomerRepository, InMemoryBookingRepository
)
from infrastructure import config
from domain.enums import BookingStatus
from domain.exceptions import BookingConflictError, CustomerBookingsNotFoundError, RoomNotFoundError

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=config.APP_TITLE,
    description="API for booking meeting rooms by time slot",
    version="1.0.0"
)

# Initialize repositories
room_repo = InMemoryRoomRepository()
customer_repo = InMemoryCustomerRepository()
booking_repo = InMemoryBookingRepository()

# Services are shared across requests so the booking ledger's room locks are too
room_service = RoomService(room_repo)
customer_service = CustomerService(customer_repo)
booking_service = BookingService(booking_repo, room_service, customer_service)
query_service = BookingQueryService(room_service, customer_service, booking_service)


# Dependency injection
def get_room_service() -> RoomService:
    return room_service

def get_booking_service() -> BookingService:
    return booking_service

def get_query_service() -> BookingQueryService:
    return query_service

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/booking-status", tags=["Enum Reference"])
async def get_booking_statuses():
    """Get all BookingStatus enum values"""
    return {
        "values": [item.value for item in BookingStatus],
        "description": "Booking status values: Confirmed"
    }

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@app.post("/rooms", response_model=RoomResponse, status_code=201, tags=["Rooms"])
async def create_room(
    request: CreateRoomRequest,
    service: RoomService = Depends(get_room_service)
):
    """Create a room"""
    room = await service.create_room(
        seats=request.seats,
        amenities=request.amenities,
        price_per_hour=request.price_per_hour
    )
    return _room_to_response(room)

@app.get("/rooms", response_model=List[RoomWithBookingsResponse], tags=["Rooms"])
async def list_rooms(
    today: str = Depends(get_today),
    service: BookingQueryService = Depends(get_query_service)
):
    """Get all rooms with their bookings and today's booked status"""
    views = await service.rooms_with_bookings(today)
    return [
        RoomWithBookingsResponse(
            **_room_to_response(view.room).model_dump(),
            booked_status=view.booked_status,
            bookings=[
                RoomBookingResponse(
                    customer_name=b.customer_name,
                    date=b.date,
                    start_time=b.start_time,
                    end_time=b.end_time
                )
                for b in view.bookings
            ]
        )
        for view in views
    ]

@app.get("/rooms/{room_id}/bookings", response_model=List[BookingResponse], tags=["Rooms"])
async def list_room_bookings(
    room_id: int,
    rooms: RoomService = Depends(get_room_service),
    service: BookingService = Depends(get_booking_service)
):
    """Get all bookings of a room"""
    room = await rooms.get_room(room_id)
    if not room:
        raise HTTPException(status_code=404, detail=RoomNotFoundError.message)
    bookings = await service.list_bookings_for_room(room_id)
    return [_booking_to_response(b) for b in bookings]

# ============================================================================
# BOOKING ENDPOINTS
# ============================================================================

@app.post("/bookings", response_model=BookingResponse, status_code=201, tags=["Bookings"])
async def create_booking(
    request: CreateBookingRequest,
    service: BookingService = Depends(get_booking_service)
):
    """Book a room for a time slot"""
    try:
        booking = await service.propose_booking(
            customer_name=request.customer_name,
            date=request.date,
            start_time=request.start_time,
            end_time=request.end_time,
            room_id=request.room_id
        )
        return _booking_to_response(booking)
    except BookingConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RoomNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

# ============================================================================
# CUSTOMER ENDPOINTS
# ============================================================================

@app.get("/customers", response_model=List[CustomerWithBookingsResponse], tags=["Customers"])
async def list_customers(
    service: BookingQueryService = Depends(get_query_service)
):
    """Get all customers with their bookings"""
    views = await service.customers_with_bookings()
    return [
        CustomerWithBookingsResponse(
            customer_id=view.customer_id,
            customer_name=view.customer_name,
            bookings=[
                CustomerBookingResponse(
                    room_id=b.room_id,
                    date=b.date,
                    start_time=b.start_time,
                    end_time=b.end_time
                )
                for b in view.bookings
            ]
        )
        for view in views
    ]

@app.get("/customers/{customer_name}/bookings", response_model=List[BookingDetailResponse], tags=["Customers"])
async def list_customer_bookings(
    customer_name: str,
    service: BookingQueryService = Depends(get_query_service)
):
    """Get all bookings made by a customer"""
    try:
        details = await service.customer_booking_details(customer_name)
    except CustomerBookingsNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [
        BookingDetailResponse(
            customer_name=d.booking.customer_name,
            room_id=d.booking.room_id,
            date=d.booking.date,
            start_time=d.booking.start_time,
            end_time=d.booking.end_time,
            booking_id=d.booking.booking_id,
            created_at=d.booking.created_at,
            booking_status=d.booking_status.value
        )
        for d in details
    ]

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _room_to_response(room) -> RoomResponse:
    """Convert Room entity to RoomResponse"""
    return RoomResponse(
        id=room.room_id,
        seats=room.seats,
        amenities=room.amenities,
        price_per_hour=room.price_per_hour
    )

def _booking_to_response(booking) -> BookingResponse:
    """Convert Booking entity to BookingResponse"""
    return BookingResponse(
        id=booking.booking_id,
        customer_name=booking.customer_name,
        date=booking.date,
        start_time=booking.start_time,
        end_time=booking.end_time,
        room_id=booking.room_id,
        created_at=booking.created_at
    )

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting server on http://%s:%s", config.APP_HOST, config.APP_PORT)
    uvicorn.run(app, host=config.APP_HOST, port=config.APP_PORT)
