"""Projections of ORM rows into the JSON shapes the API returns."""


def serialize_user(user):
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
    }


def serialize_blog(blog):
    return {
        "id": blog.id,
        "userId": blog.user_id,
        "title": blog.title,
        "body": blog.body,
        "mediaUrl": blog.media_url,
        "category": blog.category.value if blog.category else None,
        "createdAt": blog.created_at.isoformat() if blog.created_at else None,
    }


def serialize_like(like):
    return {"id": like.id, "userId": like.user_id, "blogId": like.blog_id}


def serialize_saved_blog(saved):
    return {"id": saved.id, "userId": saved.user_id, "blogId": saved.blog_id}


def serialize_comment(comment):
    return {
        "id": comment.id,
        "userId": comment.user_id,
        "blogId": comment.blog_id,
        "body": comment.body,
    }


def serialize_follow(follow):
    return {"followingId": follow.following_id, "followedById": follow.followed_by_id}
