from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi import status
from pydantic import BaseModel
from typing import Optional
from models import RegistrationStatus
from errors import (
    EventManagementError, InvalidCapacity, InvalidCategory, InvalidCredentials,
    InvalidEventId, InvalidRating, PermissionDenied,
)
from auth import manager, get_current_user, create_access_token, create_refresh_token, decode_token, oauth2_scheme
from utils import build_detail, check_admin, parse_category, validate_capacity, validate_rating
import logging
import uvicorn
import config

# Logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Campus Event Management API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    InvalidCredentials: 401,
    PermissionDenied: 403,
    InvalidEventId: 404,
    InvalidCategory: 400,
    InvalidCapacity: 400,
    InvalidRating: 400,
}

@app.exception_handler(EventManagementError)
async def handle_event_management_error(request: Request, exc: EventManagementError):
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})

# -------------------------------
# Schemas
# -------------------------------
class EventCreate(BaseModel):
    name: str
    date: str
    capacity: int
    category: str
    speaker: Optional[str] = None
    topic: Optional[str] = None
    online: bool = False
    sport_type: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Web Development",
                "date": "2024-11-01",
                "capacity": 50,
                "category": "Technical",
                "topic": "Full-stack JavaScript",
                "online": True
            }
        }

class RatingCreate(BaseModel):
    rating: int

class UserLogin(BaseModel):
    username: str
    password: str

class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str

# -------------------------------
# Auth Routes
# -------------------------------
@app.post("/login", response_model=TokenResponse, summary="Login and receive access/refresh tokens")
def login(user: UserLogin):
    """Authenticate user and return access and refresh tokens."""
    db_user = manager.authenticate_user(user.username, user.password)
    if db_user is None:
        raise InvalidCredentials()
    access_token = create_access_token(data={"sub": str(db_user.id)})
    refresh_token = create_refresh_token(data={"sub": str(db_user.id)})
    logger.info(f"User {db_user.username} logged in")
    return {"access_token": access_token, "refresh_token": refresh_token}

@app.post("/refresh", response_model=dict, summary="Refresh access token")
def refresh(token: str = Depends(oauth2_scheme)):
    """Exchange a refresh token for a new access token."""
    token_data = decode_token(token, "refresh")
    user = manager.get_user_by_id(token_data.user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User not found")
    access_token = create_access_token(data={"sub": str(user.id)})
    logger.info(f"Token refreshed for {user.username}")
    return {"message": "Token refreshed", "data": {"access_token": access_token}}

# -------------------------------
# Event Routes
# -------------------------------
@app.get("/", response_model=dict, summary="API root endpoint")
def root():
    """Welcome message for the Campus Event Management API."""
    return {"message": "Welcome to Campus Event Management API", "data": {}}

@app.get("/events", response_model=dict, summary="List all events")
def list_events():
    """Retrieve a list of all events in creation order."""
    data = [e.to_dict() for e in manager.list_all_events()]
    return {"message": "Events retrieved", "data": data}

@app.get("/events/search", response_model=dict, summary="Search events")
def search_events(q: str):
    """Case-sensitive substring search over event name, date and category."""
    data = [e.to_dict() for e in manager.search_events(q)]
    return {"message": "Events retrieved" if data else "No events found", "data": data}

@app.get("/events/{event_id}", response_model=dict, summary="Get an event")
def get_event(event_id: int):
    """Retrieve a single event by ID."""
    event = manager.get_event(event_id)
    if event is None:
        raise InvalidEventId()
    return {"message": "Event retrieved", "data": event.to_dict()}

@app.post("/events", response_model=dict, status_code=status.HTTP_201_CREATED, summary="Create a new event")
def create_event(event: EventCreate, current_user=Depends(get_current_user)):
    """Create a new event (admins only)."""
    check_admin(current_user)
    capacity = validate_capacity(event.capacity)
    category = parse_category(event.category)
    detail = build_detail(
        category,
        speaker=event.speaker,
        topic=event.topic,
        online=event.online,
        sport_type=event.sport_type,
    )
    evt = manager.create_event(event.name, event.date, capacity, detail)
    logger.info(f"Event {evt.id} created by {current_user.username}")
    return {"message": "Event created", "data": evt.to_dict()}

@app.post("/events/{event_id}/register", response_model=dict, summary="Register for an event")
def register_for_event(event_id: int, current_user=Depends(get_current_user)):
    """Register the current user, or waitlist them when the event is full."""
    result = manager.register_user(event_id, current_user)
    if result == RegistrationStatus.INVALID_EVENT_ID:
        raise InvalidEventId()
    if result == RegistrationStatus.ACCEPTED:
        message = "Participant registered successfully"
    else:
        message = "Event is full. You've been added to the waitlist"
    return {"message": message, "data": {"event_id": event_id, "status": result.value}}

@app.post("/events/{event_id}/rate", response_model=dict, summary="Rate an event")
def rate_event(event_id: int, rating: RatingCreate, current_user=Depends(get_current_user)):
    """Rate an event from 1 to 5. Re-rating replaces the user's previous rating."""
    value = validate_rating(rating.rating)
    if not manager.rate_event(event_id, value, current_user):
        raise InvalidEventId()
    return {"message": "Thank you for rating the event!", "data": {"event_id": event_id, "rating": value}}

@app.get("/profile", response_model=dict, summary="Current user's profile")
def profile(current_user=Depends(get_current_user)):
    """Registered events and ratings of the current user."""
    return {"message": "Profile retrieved", "data": manager.user_profile(current_user).to_dict()}

def run():
    """Serve the API with uvicorn."""
    uvicorn.run(app, host=config.HOST, port=config.PORT)

if __name__ == "__main__":
    run()
