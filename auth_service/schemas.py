from pydantic import BaseModel


class Response(BaseModel):
    status_code: int = 0
    status_msg: str = "success"


class TokenResponse(Response):
    user_id: int
    token: str


class UserInfo(BaseModel):
    id: int
    name: str
    follow_count: int = 0
    follower_count: int = 0


class UserResponse(Response):
    user: UserInfo
