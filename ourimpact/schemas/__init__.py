# Pydantic schemas package

from ourimpact.schemas.base import BaseSchema, IDSchema
from ourimpact.schemas.comment import (
    CommentWithLikes, CommentCreate, CommentUpdate, NewLike,
    CommentResponse, CommentList, NewLikeResponse, RemovedLikeResponse,
    CommentUpdatedResponse, CommentDeletedResponse,
)
from ourimpact.schemas.city import City, CityWithComments, CityList, CityResponse, CityDataResponse
from ourimpact.schemas.user import (
    UserLogin, UserCreate, UserUpdate, UserProfile, UserWithComments,
    TokenResponse, UserResponse, UserDetailResponse, UserList, AdminList,
    UserDeletedResponse,
)
from ourimpact.schemas.resource import (
    ContentType, ResourceCreate, ResourceReplace, Resource, ResourceList,
    ArticleList, VideoList, LandingPageList, ResourceResponse,
    ResourceAddedResponse, ResourceUpdatedResponse, ResourceDeletedResponse,
)
from ourimpact.schemas.like import Like, AllLikesResponse, UserLikesResponse
from ourimpact.schemas.temp import TempReadingCreate, TempReading, WeatherDataResponse

__all__ = [
    # Base schemas
    "BaseSchema", "IDSchema",

    # Comments and likes
    "CommentWithLikes", "CommentCreate", "CommentUpdate", "NewLike",
    "CommentResponse", "CommentList", "NewLikeResponse", "RemovedLikeResponse",
    "CommentUpdatedResponse", "CommentDeletedResponse",
    "Like", "AllLikesResponse", "UserLikesResponse",

    # Cities
    "City", "CityWithComments", "CityList", "CityResponse", "CityDataResponse",

    # Users and auth
    "UserLogin", "UserCreate", "UserUpdate", "UserProfile", "UserWithComments",
    "TokenResponse", "UserResponse", "UserDetailResponse", "UserList", "AdminList",
    "UserDeletedResponse",

    # Resources
    "ContentType", "ResourceCreate", "ResourceReplace", "Resource", "ResourceList",
    "ArticleList", "VideoList", "LandingPageList", "ResourceResponse",
    "ResourceAddedResponse", "ResourceUpdatedResponse", "ResourceDeletedResponse",

    # Weather readings
    "TempReadingCreate", "TempReading", "WeatherDataResponse",
]
