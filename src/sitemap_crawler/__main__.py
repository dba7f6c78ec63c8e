from sitemap_crawler.cli import main

raise SystemExit(main())
