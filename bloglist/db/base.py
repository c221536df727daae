# Import all models here so metadata.create_all sees them
from bloglist.db.session import Base

from bloglist.modules.authors.models.author import Author
from bloglist.modules.posts.models.post import Post
