# CRUD operations package

from ourimpact.crud.city import city
from ourimpact.crud.comment import comment
from ourimpact.crud.like import like
from ourimpact.crud.resource import resource
from ourimpact.crud.temp import temp
from ourimpact.crud.user import user

__all__ = ["city", "comment", "like", "resource", "temp", "user"]
