"""Blog Demo: users, blogs, posts and a reactive comment editor."""
