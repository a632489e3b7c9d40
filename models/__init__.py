from .user import User
from .diary import Diary, DiaryCategory, Color, diary_user
from .page import Page
from .comment import Comment
from .notice import Notice, NoticeType
