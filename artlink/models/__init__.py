from .user import User, ClientProfile, ArtistProfile
from .commission import CommissionRequest, CommissionProgressUpdate
from .portfolio import Portfolio, PortfolioTag
from .project import Project, Application
from .availability import AvailabilityPost
