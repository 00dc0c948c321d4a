"""Web application, device builders and discovery settings for serving ascot devices."""