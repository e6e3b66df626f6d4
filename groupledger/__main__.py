import uvicorn
from groupledger.core.config import settings

if __name__ == "__main__":
    uvicorn.run("groupledger.main:app", host=settings.HOST, port=settings.PORT)
