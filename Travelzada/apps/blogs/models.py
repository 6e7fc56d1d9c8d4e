from django.db import models
from django.utils.text import slugify


class BlogPost(models.Model):
    """
    Blog article.

    ``blog_structure`` holds the sections of the article as a JSON list, for
    example ``[{"type": "heading", "text": "..."}, {"type": "paragraph", ...}]``.
    """

    title = models.CharField(max_length=300)
    subtitle = models.CharField(max_length=300, blank=True, default='')
    description = models.TextField(blank=True, default='')
    content = models.TextField(blank=True, default='')
    blog_structure = models.JSONField(default=list, blank=True)
    image = models.CharField(max_length=1000, blank=True, default='')
    author = models.CharField(max_length=150, blank=True, default='')
    date = models.DateField(null=True, blank=True)
    category = models.CharField(max_length=100, blank=True, default='')

    likes = models.PositiveIntegerField(default=0)
    views = models.PositiveIntegerField(default=0)
    comments = models.PositiveIntegerField(default=0)
    shares = models.PositiveIntegerField(default=0)

    featured = models.BooleanField(default=False)
    published = models.BooleanField(default=False)

    seo_title = models.CharField(max_length=300, blank=True, default='')
    seo_description = models.TextField(blank=True, default='')
    seo_keywords = models.TextField(blank=True, default='')
    slug = models.SlugField(max_length=320, unique=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Blog post"
        verbose_name_plural = "Blog posts"
        db_table = "blogs"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            base = slugify(self.title)[:300] or 'post'
            slug = base
            suffix = 2
            while BlogPost.objects.filter(slug=slug).exclude(pk=self.pk).exists():
                slug = f"{base}-{suffix}"
                suffix += 1
            self.slug = slug
        super().save(*args, **kwargs)
