from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["message"])

TEST_MESSAGE = "Cloud MongoDB connected 🚀"


@router.get("/message")
async def get_message():
    return {"message": TEST_MESSAGE}
