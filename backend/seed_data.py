# Sample catalog loaded when SEED_SAMPLE_CONTENT is enabled

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w={}&h={}"

SAMPLE_CONTENT = [
    {
        "title": "Business Card Template",
        "description": "Professional business card design",
        "category": "general",
        "type": "template",
        "fileUrl": "/assets/business-card-template.psd",
        "thumbnailUrl": _UNSPLASH.format("1586227740560-8cf2732c1531", 400, 300),
        "featured": True,
    },
    {
        "title": "Letter Template",
        "description": "Standard business letter format",
        "category": "general",
        "type": "template",
        "fileUrl": "/assets/letter-template.docx",
        "thumbnailUrl": _UNSPLASH.format("1586953208448-b95a79798f07", 400, 300),
    },
    {
        "title": "Logo Design Bundle",
        "description": "Professional logo templates",
        "category": "general",
        "type": "bundle",
        "fileUrl": "/assets/logo-bundle.zip",
        "thumbnailUrl": _UNSPLASH.format("1621556008648-88d56d96e6c8", 400, 300),
    },
    {
        "title": "Instagram Reels Template",
        "description": "Motivational quote design",
        "category": "social-media",
        "type": "video",
        "fileUrl": "/assets/sample-reel.mp4",
        "thumbnailUrl": _UNSPLASH.format("1611224923853-80b023f02d71", 400, 600),
        "featured": True,
    },
    {
        "title": "Facebook Post Graphic",
        "description": "Brand awareness design",
        "category": "social-media",
        "type": "graphic",
        "fileUrl": "/assets/facebook-post.jpg",
        "thumbnailUrl": _UNSPLASH.format("1558655146-9f40138edfeb", 400, 400),
    },
    {
        "title": "LinkedIn Carousel",
        "description": "Professional growth tips",
        "category": "social-media",
        "type": "graphic",
        "fileUrl": "/assets/linkedin-carousel.pdf",
        "thumbnailUrl": _UNSPLASH.format("1560472354-b33ff0c44a43", 400, 300),
    },
    {
        "title": "YouTube Thumbnail",
        "description": "Educational content design",
        "category": "social-media",
        "type": "graphic",
        "fileUrl": "/assets/youtube-thumbnail.jpg",
        "thumbnailUrl": _UNSPLASH.format("1492619375914-88005aa9e8fb", 400, 225),
    },
    {
        "title": "Training Video Series",
        "description": "Leadership development modules",
        "category": "field-tools",
        "type": "video",
        "fileUrl": "/assets/training-video.mp4",
        "thumbnailUrl": _UNSPLASH.format("1552664730-d307ca884978", 400, 225),
        "featured": True,
    },
    {
        "title": "Presentation Template",
        "description": "Brand promoter materials",
        "category": "field-tools",
        "type": "template",
        "fileUrl": "/assets/presentation-template.pptx",
        "thumbnailUrl": _UNSPLASH.format("1551288049-bebda4e38f71", 400, 225),
    },
    {
        "title": "Process Infographic",
        "description": "Step-by-step guides",
        "category": "field-tools",
        "type": "graphic",
        "fileUrl": "/assets/process-infographic.jpg",
        "thumbnailUrl": _UNSPLASH.format("1551288049-bebda4e38f71", 400, 533),
    },
    {
        "title": "Event Promo Video",
        "description": "Leadership conference",
        "category": "events",
        "type": "video",
        "fileUrl": "/assets/event-promo.mp4",
        "thumbnailUrl": _UNSPLASH.format("1540575467063-178a50c2df87", 400, 225),
        "featured": True,
    },
    {
        "title": "Event Flyer",
        "description": "Networking event design",
        "category": "events",
        "type": "graphic",
        "fileUrl": "/assets/event-flyer.jpg",
        "thumbnailUrl": _UNSPLASH.format("1558618666-fcd25c85cd64", 400, 533),
    },
    {
        "title": "Social Media Kit",
        "description": "Complete event package",
        "category": "events",
        "type": "bundle",
        "fileUrl": "/assets/social-media-kit.zip",
        "thumbnailUrl": _UNSPLASH.format("1611224923853-80b023f02d71", 400, 400),
    },
    {
        "title": "T-Shirt Mockup",
        "description": "Brand merchandise design",
        "category": "store",
        "type": "mockup",
        "fileUrl": "/assets/tshirt-mockup.psd",
        "thumbnailUrl": _UNSPLASH.format("1542291026-7eec264c27ff", 400, 400),
    },
    {
        "title": "Coffee Mug Design",
        "description": "Daily motivation piece",
        "category": "store",
        "type": "mockup",
        "fileUrl": "/assets/mug-design.psd",
        "thumbnailUrl": _UNSPLASH.format("1544787219-7f47ccb76574", 400, 400),
    },
    {
        "title": "Sticker Pack",
        "description": "Brand awareness kit",
        "category": "store",
        "type": "bundle",
        "fileUrl": "/assets/sticker-pack.zip",
        "thumbnailUrl": _UNSPLASH.format("1558618666-fcd25c85cd64", 400, 400),
    },
    {
        "title": "Business Card",
        "description": "Professional networking",
        "category": "store",
        "type": "template",
        "fileUrl": "/assets/business-card.psd",
        "thumbnailUrl": _UNSPLASH.format("1560472354-b33ff0c44a43", 400, 400),
    },
]
