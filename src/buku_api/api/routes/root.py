from fastapi import APIRouter

from buku_api.schemas.envelope import GreetingEnvelope

router = APIRouter(tags=["health"])


@router.get("/", response_model=GreetingEnvelope, summary="Greeting")
def read_root() -> GreetingEnvelope:
    return GreetingEnvelope(msg="Hello world")
