from rest_framework import serializers

from .models import BlogPost


class BlogPostSerializer(serializers.ModelSerializer):
    slug = serializers.SlugField(required=False, allow_blank=True, max_length=320)

    class Meta:
        model = BlogPost
        fields = [
            "id",
            "title",
            "subtitle",
            "description",
            "content",
            "blog_structure",
            "image",
            "author",
            "date",
            "category",
            "likes",
            "views",
            "comments",
            "shares",
            "featured",
            "published",
            "seo_title",
            "seo_description",
            "seo_keywords",
            "slug",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["likes", "views", "comments", "shares", "created_at", "updated_at"]

    def validate_slug(self, value):
        if value:
            queryset = BlogPost.objects.filter(slug=value)
            if self.instance is not None:
                queryset = queryset.exclude(pk=self.instance.pk)
            if queryset.exists():
                raise serializers.ValidationError("A post with this slug already exists.")
        return value

    def validate_blog_structure(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("blog_structure must be a list of sections.")
        return value


class BlogPostListSerializer(serializers.ModelSerializer):
    class Meta:
        model = BlogPost
        fields = [
            "id",
            "title",
            "subtitle",
            "description",
            "image",
            "author",
            "date",
            "category",
            "likes",
            "views",
            "featured",
            "published",
            "slug",
            "created_at",
        ]
